"""
apply a compiled plan to the channels and programmes of a listing
"""

import logging

from .index import ChannelNameIndex
from .log import IssueLog
from .phase import (
    ChannelFilterPhase,
    ClumpRepairPhase,
    LoadPhase,
    ProgrammeFilterPhase,
    ProgrammePrunePhase,
    clump_groups,
)
from .pipeline import run_pipeline


class FilterState:
    """
    what the tests may consult or record during a single run
    """

    def __init__(self, channel_names=None, issues=None):
        self.channel_names = (
            channel_names if channel_names is not None else ChannelNameIndex()
        )
        self.issues = issues if issues is not None else IssueLog()
        # channels already warned about missing stop times
        self.missing_stop = set()


def filter_listings(plan, channels, programmes, issues=None):
    """
    the channels and programmes which pass the plan

    channels: dict of channel id to channel
    programmes: list of programmes, in document order
    """
    channel_names = ChannelNameIndex(
        channels.values(), plan.channel_name_patterns, ignore_case=plan.ignore_case
    )
    state = FilterState(channel_names=channel_names, issues=issues)

    blocks = run_pipeline(
        LoadPhase(channels.values(), kind="channel"),
        ChannelFilterPhase(plan, state),
    )
    kept_channels = {block["row"].id: block["row"] for block in blocks}

    prune = ProgrammePrunePhase()
    blocks = run_pipeline(
        LoadPhase(programmes, kind="programme"),
        ProgrammeFilterPhase(plan, state),
        ClumpRepairPhase(clump_groups(programmes, issues=state.issues)),
        prune,
    )
    kept_programmes = [block["row"] for block in blocks]

    logging.info(
        f"kept {len(kept_channels)} of {len(channels)} channels "
        f"and {prune.count} of {len(programmes)} programmes"
    )
    return kept_channels, kept_programmes


def filter_listings_data(plan, data, issues=None):
    encoding, credits, channels, programmes = data
    channels, programmes = filter_listings(plan, channels, programmes, issues=issues)
    return encoding, credits, channels, programmes
