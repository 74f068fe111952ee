import pluggy

hookspec = pluggy.HookspecMarker("tv_grep")
hookimpl = pluggy.HookimplMarker("tv_grep")


class PredicatePlugin:
    @hookspec
    def tv_grep_predicates(self):
        """Return the predicates this plugin makes available to --eval

        :return: a dict of name to a function taking a programme and returning
            True to keep it; the function may change the programme
        """
