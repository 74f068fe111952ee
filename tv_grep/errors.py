class TvGrepError(Exception):
    pass


class ConfigurationError(TvGrepError):
    """
    the expression or the options given can't be used to build a filter
    """


class DataError(TvGrepError):
    """
    the listings read are structurally unusable
    """


class DuplicateChannelError(DataError):
    def __init__(self, channel_id):
        self.channel_id = channel_id
        super().__init__(f"channel {channel_id!r} is defined more than once")


class OutputError(TvGrepError):
    pass
