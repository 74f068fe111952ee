import logging

from ..errors import DataError
from .phase import Phase


def clump_groups(programmes, issues=None):
    """
    the entry numbers of the programmes in each clump, in clump order

    A clump is the programmes on a channel sharing a start time which carry
    a clumpidx. Worked out from all of the programmes before any are dropped.
    A programme with an unreadable clumpidx is left out of the clumps, and
    written out as it was read.
    """
    groups = {}
    for number, programme in enumerate(programmes, start=1):
        try:
            clumpidx = programme.clumpidx
        except DataError as e:
            logging.warning(
                f"programme on {programme.channel} at {programme.start}: {e}"
            )
            if issues is not None:
                issues.log_issue(
                    "clumpidx",
                    "invalid-clumpidx",
                    programme.get("clumpidx"),
                    str(e),
                    channel=programme.channel,
                    start=programme.start,
                )
            continue
        if clumpidx is None:
            continue
        key = (programme.channel, programme.start)
        groups.setdefault(key, []).append((clumpidx[0], number))

    return {key: [number for _, number in sorted(group)] for key, group in groups.items()}


def renumber(programmes):
    if len(programmes) == 1:
        programmes[0].clumpidx = None
        return

    total = len(programmes)
    for position, programme in enumerate(programmes):
        programme.clumpidx = (position, total)


class ClumpRepairPhase(Phase):
    """
    renumber the clumpidx of the programmes left in a clump once some are dropped

    The survivors keep their order and are numbered 0/N to N-1/N, and a lone
    survivor loses its clumpidx.
    """

    def __init__(self, groups):
        self.groups = groups

    def process(self, stream):
        blocks = list(stream)
        entries = {block["entry-number"]: block for block in blocks}

        for key, group in self.groups.items():
            survivors = [
                entries[number]["row"]
                for number in group
                if entries[number].get("include", True)
            ]
            if len(survivors) == len(group) or not survivors:
                continue

            logging.debug(
                f"clump on {key[0]} at {key[1]} reduced from {len(group)} to {len(survivors)}"
            )
            renumber(survivors)

        yield from blocks
