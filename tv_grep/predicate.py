"""
factories for the tests an expression is built from

Every factory returns a predicate: a function of (record, state) returning
True or False, where state is the FilterState of the current run.
"""

import logging
import re

import canonicaljson

from .errors import ConfigurationError
from .field import as_texts, is_present, occurrences


def compile_pattern(pattern, ignore_case=False):
    try:
        return re.compile(pattern, re.IGNORECASE if ignore_case else 0)
    except re.error as e:
        raise ConfigurationError(f"bad regular expression {pattern!r}: {e}")


def negate(predicate):
    def test(record, state):
        return not predicate(record, state)

    return test


def present(fieldname):
    def test(record, state):
        return is_present(record, fieldname)

    return test


def matches(fieldname, regexp):
    def test(record, state):
        for occurrence in occurrences(record, fieldname):
            if regexp.search(occurrence.text):
                return True
        return False

    return test


def programme_channel_id(channel_id):
    def test(programme, state):
        return programme.channel == channel_id

    return test


def channel_id(channel_id):
    def test(channel, state):
        return channel.id == channel_id

    return test


def programme_channel_id_matches(regexp):
    def test(programme, state):
        return regexp.search(programme.channel) is not None

    return test


def channel_id_matches(regexp):
    def test(channel, state):
        return regexp.search(channel.id) is not None

    return test


def programme_channel_name(pattern):
    def test(programme, state):
        return programme.channel in state.channel_names.ids(pattern)

    return test


def channel_name(pattern):
    def test(channel, state):
        return channel.id in state.channel_names.ids(pattern)

    return test


def programme_date(programme, fieldname, state, datatype):
    value = programme.get(fieldname)
    if value is None:
        return None

    issues = state.issues
    issues.fieldname = fieldname
    issues.channel = programme.channel
    issues.start = programme.start
    return datatype.normalise(value, issues=issues)


def warn_missing_stop(programme, state):
    channel = programme.channel
    if channel in state.missing_stop:
        return
    state.missing_stop.add(channel)

    logging.warning(
        f"programmes on channel {channel} have no stop time, "
        "their start times were compared with the cutoff instead; "
        "run the listings through tv_sort first to add stop times"
    )
    state.issues.log_issue(
        "stop",
        "missing-stop",
        "",
        "no stop time, start time used instead",
        channel=channel,
        start=programme.start,
    )


def on_after(cutoff, datatype):
    """
    the programme is still on, or yet to start, at the cutoff

    A programme is on from its start up to but not including its stop. When
    there's no stop time only the start can be compared, which drops
    programmes that started before the cutoff but may still be on.
    """

    def test(programme, state):
        if programme.stop is not None:
            stop = programme_date(programme, "stop", state, datatype)
            return stop is not None and stop > cutoff

        start = programme_date(programme, "start", state, datatype)
        if start is None:
            return False
        if start > cutoff:
            return True

        warn_missing_stop(programme, state)
        return False

    return test


def on_before(cutoff, datatype):
    """
    the programme has started by the cutoff
    """

    def test(programme, state):
        start = programme_date(programme, "start", state, datatype)
        return start is not None and start <= cutoff

    return test


def record_text(record):
    return canonicaljson.encode_canonical_json(as_texts(record)).decode("utf-8")


def whole_record(regexp):
    def test(record, state):
        return regexp.search(record_text(record)) is not None

    return test


def external(name, function):
    def test(programme, state):
        logging.debug(f"eval {name} on {programme.channel} {programme.start}")
        return bool(function(programme))

    return test
