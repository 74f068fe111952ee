from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional, Tuple

from ..errors import DataError


@dataclass(frozen=True)
class Occurrence:
    text: str = ""
    attributes: Dict[str, str] = field(default_factory=dict)
    # read from an XML attribute rather than a child element
    is_attribute: bool = False
    # the parsed element, kept so structured content is written back unchanged
    element: Any = field(default=None, compare=False, repr=False)


class Record:
    """
    an XMLTV element as an ordered mapping of field name to occurrences

    XML attributes are held as fields with a single occurrence so tests can
    treat attributes and child elements alike.
    """

    tag = ""
    attribute_names: Tuple[str, ...] = ()

    def __init__(self, fields=None):
        self.fields: Dict[str, List[Occurrence]] = fields if fields is not None else {}

    def add(self, name, text="", attributes=None, element=None, is_attribute=False):
        self.fields.setdefault(name, []).append(
            Occurrence(
                text, attributes or {}, is_attribute=is_attribute, element=element
            )
        )

    def get(self, name, default=None):
        occurrences = self.fields.get(name)
        if not occurrences:
            return default
        return occurrences[0].text

    def set(self, name, value):
        is_attribute = name in self.attribute_names or any(
            occurrence.is_attribute for occurrence in self.fields.get(name, [])
        )
        self.fields[name] = [Occurrence(value, is_attribute=is_attribute)]

    def remove(self, name):
        self.fields.pop(name, None)

    def __contains__(self, name):
        return bool(self.fields.get(name))

    def __eq__(self, other):
        return type(self) is type(other) and self.fields == other.fields

    def __repr__(self):
        return f"{self.__class__.__name__}({self.fields!r})"


class Channel(Record):
    tag = "channel"
    attribute_names = ("id",)

    @property
    def id(self):
        return self.get("id")


def parse_clumpidx(value):
    try:
        position, total = value.split("/")
        position, total = int(position), int(total)
    except ValueError:
        raise DataError(f"bad clumpidx {value!r}")
    if total < 1 or not 0 <= position < total:
        raise DataError(f"bad clumpidx {value!r}")
    return position, total


class Programme(Record):
    tag = "programme"
    attribute_names = (
        "start",
        "stop",
        "pdc-start",
        "vps-start",
        "showview",
        "videoplus",
        "channel",
        "clumpidx",
    )

    @property
    def channel(self):
        return self.get("channel")

    @property
    def start(self):
        return self.get("start")

    @property
    def stop(self) -> Optional[str]:
        return self.get("stop")

    @property
    def clumpidx(self) -> Optional[Tuple[int, int]]:
        value = self.get("clumpidx")
        if value is None:
            return None
        return parse_clumpidx(value)

    @clumpidx.setter
    def clumpidx(self, value):
        if value is None:
            self.remove("clumpidx")
            return

        position, total = value
        self.set("clumpidx", f"{position}/{total}")
