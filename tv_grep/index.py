import logging

from .errors import DuplicateChannelError
from .field import texts
from .predicate import compile_pattern


class ChannelNameIndex:
    """
    the ids of the channels whose display names match each channel-name pattern
    """

    def __init__(self, channels=(), patterns=(), ignore_case=False):
        self.index = {}
        channels = list(channels)

        seen = set()
        for channel in channels:
            if channel.id in seen:
                raise DuplicateChannelError(channel.id)
            seen.add(channel.id)

        for pattern in patterns:
            if pattern in self.index:
                continue
            regexp = compile_pattern(pattern, ignore_case)
            ids = set()
            for channel in channels:
                if any(regexp.search(name) for name in texts(channel, "display-name")):
                    ids.add(channel.id)
            self.index[pattern] = frozenset(ids)
            logging.debug(f"channel-name {pattern!r} matches {sorted(ids)}")

    def ids(self, pattern):
        return self.index.get(pattern, frozenset())

    def __len__(self):
        return len(self.index)
