import inspect
import logging

import pluggy

from tv_grep import hookspecs
from tv_grep.errors import ConfigurationError


def get_plugin_manager(plugins=()):
    pm = pluggy.PluginManager("tv_grep")

    # Gather all of the classes from hookspecs
    plugin_classes = inspect.getmembers(hookspecs, inspect.isclass)

    for name, class_ in plugin_classes:
        logging.debug("Adding hookspecs from %s", class_)
        pm.add_hookspecs(class_)

    pm.load_setuptools_entrypoints("tv_grep")
    for plugin in plugins:
        pm.register(plugin)

    try:
        # Warn if unrecognised hook implementations have been defined
        pm.check_pending()
    except pluggy.PluginValidationError as e:
        raise ConfigurationError(str(e))

    return pm


def collect_predicates(pm):
    predicates = {}
    for result in pm.hook.tv_grep_predicates():
        for name, function in result.items():
            if name in predicates:
                logging.warning(f"predicate {name} is defined by more than one plugin")
                continue
            predicates[name] = function
    return predicates
