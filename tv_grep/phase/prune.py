import logging

from .phase import Phase


class ProgrammePrunePhase(Phase):
    """
    remove the programmes marked as excluded
    """

    def __init__(self):
        self.count = 0

    def process(self, stream):
        for block in stream:
            if not block.get("include", True):
                programme = block["row"]
                logging.debug(
                    f"dropping programme {block['entry-number']} "
                    f"on {programme.channel} at {programme.start}"
                )
                continue

            self.count += 1
            yield block
