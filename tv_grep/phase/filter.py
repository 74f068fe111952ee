import logging

from .phase import Phase


class ChannelFilterPhase(Phase):
    """
    drop channels which fail the channel tests of every conjunction
    """

    def __init__(self, plan, state):
        self.plan = plan
        self.state = state

    def process(self, stream):
        for block in stream:
            channel = block["row"]
            if self.plan.keep_channel(channel, self.state):
                yield block
            else:
                logging.debug(f"dropping channel {channel.id}")


class ProgrammeFilterPhase(Phase):
    """
    mark whether each programme passes the expression

    Programmes aren't dropped here so that later phases can see the whole
    of a clump before any of it is removed.
    """

    def __init__(self, plan, state):
        self.plan = plan
        self.state = state

    def process(self, stream):
        for block in stream:
            block["include"] = self.plan.keep_programme(block["row"], self.state)
            yield block
