"""
the tests which can be used in an expression, keyed by option name
"""

from dataclasses import dataclass
from enum import Enum
from typing import Callable, Optional

from . import predicate
from .errors import ConfigurationError


class ArgumentKind(Enum):
    NONE = "none"
    REGEXP = "REGEXP"
    EMPTY = "''"
    VALUE = "CHANNEL_ID"
    DATE = "DATE"
    NAME = "NAME"


@dataclass
class Emission:
    """
    the predicates one test adds to the current conjunctions
    """

    programme: Callable
    channel: Optional[Callable] = None
    channel_name_pattern: Optional[str] = None


@dataclass
class Entry:
    name: str
    kind: ArgumentKind
    factory: Callable
    help: str = ""

    def build(self, argument, config):
        return self.factory(self.name, argument, config)


# programme child elements holding text
text_elements = [
    "title",
    "sub-title",
    "desc",
    "date",
    "category",
    "keyword",
    "language",
    "orig-language",
    "length",
    "url",
    "country",
    "episode-num",
    "premiere",
    "last-chance",
    "review",
]

# programme attributes, other than the channel
attributes = [
    "start",
    "stop",
    "pdc-start",
    "vps-start",
    "showview",
    "videoplus",
    "clumpidx",
]

# elements with no content
empty_elements = [
    "icon",
    "new",
    "previously-shown",
]

# elements made only of other elements, so not matched against a pattern
structured_elements = [
    "credits",
    "video",
    "audio",
    "subtitles",
    "rating",
    "star-rating",
    "image",
]


def field_present(name, argument, config):
    return Emission(predicate.present(name))


def field_matches(name, argument, config):
    regexp = predicate.compile_pattern(argument, config.ignore_case)
    return Emission(predicate.matches(name, regexp))


def field_structured(name, argument, config):
    if argument != "":
        raise ConfigurationError(
            f"--{name} takes only the empty string '' as its argument, "
            "the content of this element can't be matched against a pattern"
        )
    return Emission(predicate.present(name))


def channel_id(name, argument, config):
    return Emission(
        predicate.programme_channel_id(argument),
        channel=predicate.channel_id(argument),
    )


def channel_id_exp(name, argument, config):
    regexp = predicate.compile_pattern(argument, config.ignore_case)
    return Emission(
        predicate.programme_channel_id_matches(regexp),
        channel=predicate.channel_id_matches(regexp),
    )


def channel_name(name, argument, config):
    # checks the pattern compiles before any listings are read
    predicate.compile_pattern(argument, config.ignore_case)
    return Emission(
        predicate.programme_channel_name(argument),
        channel=predicate.channel_name(argument),
        channel_name_pattern=argument,
    )


def cutoff(name, argument, config):
    date = config.datatype.normalise(argument)
    if date is None:
        raise ConfigurationError(f"bad date {argument!r} for --{name}")
    return date


def on_after(name, argument, config):
    return Emission(predicate.on_after(cutoff(name, argument, config), config.datatype))


def on_before(name, argument, config):
    return Emission(
        predicate.on_before(cutoff(name, argument, config), config.datatype)
    )


def external(name, argument, config):
    if not config.allow_eval:
        raise ConfigurationError(f"--{name} is not available, it has been disabled")

    functions = config.external_predicates()
    if argument not in functions:
        known = ", ".join(sorted(functions)) or "none are installed"
        raise ConfigurationError(
            f"--{name}: no predicate named {argument!r} ({known})"
        )
    return Emission(predicate.external(argument, functions[argument]))


catalog = {}


def register(name, kind, factory, help=""):
    catalog[name] = Entry(name, kind, factory, help)


for _name in text_elements + attributes:
    register(_name, ArgumentKind.REGEXP, field_matches, f"{_name} matches REGEXP")

for _name in empty_elements:
    register(_name, ArgumentKind.NONE, field_present, f"has {_name}")

for _name in structured_elements:
    register(_name, ArgumentKind.EMPTY, field_structured, f"has {_name}")

register(
    "channel-id",
    ArgumentKind.VALUE,
    channel_id,
    "channel id is CHANNEL_ID, also filters the channels",
)
register(
    "channel-id-exp",
    ArgumentKind.REGEXP,
    channel_id_exp,
    "channel id matches REGEXP, also filters the channels",
)
register(
    "channel-name",
    ArgumentKind.REGEXP,
    channel_name,
    "a display name of the channel matches REGEXP, also filters the channels",
)
register(
    "on-after", ArgumentKind.DATE, on_after, "still on, or yet to start, at DATE"
)
register("on-before", ArgumentKind.DATE, on_before, "started by DATE")
register("eval", ArgumentKind.NAME, external, "the installed predicate NAME is true")


def resolve(option, names):
    """
    the full name of a long option, allowing any unambiguous prefix
    """
    if option in names:
        return option

    candidates = sorted(name for name in names if name.startswith(option))
    if not candidates:
        raise ConfigurationError(f"unknown option --{option}")
    if len(candidates) > 1:
        raise ConfigurationError(
            f"option --{option} is ambiguous, it could be "
            + ", ".join(f"--{name}" for name in candidates)
        )
    return candidates[0]
