from dataclasses import dataclass, field
from typing import Any, Dict, Optional

from .datatype.datetime import DateTimeDataType


@dataclass
class FilterConfig:
    """
    settings which apply to every test in an expression

    ignore_case: match every REGEXP, and the bare pattern, ignoring case
    allow_eval: whether --eval may be used at all
    plugin_manager: supplies the predicates --eval can name, loaded on first use
    """

    ignore_case: bool = False
    allow_eval: bool = True
    plugin_manager: Optional[Any] = None
    datatype: DateTimeDataType = field(default_factory=DateTimeDataType)
    _predicates: Optional[Dict] = field(default=None, repr=False)

    def external_predicates(self):
        if self._predicates is None:
            from .plugin import get_plugin_manager, collect_predicates

            if self.plugin_manager is None:
                self.plugin_manager = get_plugin_manager()
            self._predicates = collect_predicates(self.plugin_manager)
        return self._predicates
