import re
from datetime import datetime, timezone

from .datatype import DataType

# XMLTV dates are YYYYMMDDhhmmss, possibly truncated, with an optional offset
compact_pattern = re.compile(r"^(\d{8}|\d{10}|\d{12}|\d{14})\s*([+-]\d{4}|Z)?$")


class DateTimeDataType(DataType):
    """
    parse XMLTV timestamps, and the looser forms people type for cutoffs,
    into timezone-aware datetimes so they can be compared
    """

    patterns = [
        "%Y%m%d%H%M%S %z",
        "%Y%m%d%H%M%S",
        "%Y-%m-%dT%H:%M:%S%z",
        "%Y-%m-%dT%H:%M:%S",
        "%Y-%m-%d %H:%M:%S %z",
        "%Y-%m-%d %H:%M:%S%z",
        "%Y-%m-%d %H:%M:%S",
        "%Y-%m-%dT%H:%M%z",
        "%Y-%m-%dT%H:%M",
        "%Y-%m-%d %H:%M %z",
        "%Y-%m-%d %H:%M",
        "%Y-%m-%d",
    ]

    def __init__(self, default_timezone=timezone.utc):
        """
        default_timezone: applied to values which carry no offset
        """
        self.default_timezone = default_timezone

    def format(self, value):
        return value.strftime("%Y%m%d%H%M%S %z")

    def normalise(self, fieldvalue, issues=None):
        value = fieldvalue.strip()

        # pad to the full width, strptime would otherwise split the digits anyhow
        match = compact_pattern.match(value)
        if match:
            digits, offset = match.groups()
            value = digits.ljust(14, "0")
            if offset:
                value = f"{value} {offset}"

        for pattern in self.patterns:
            try:
                date = datetime.strptime(value, pattern)
            except ValueError:
                continue

            if date.tzinfo is None:
                date = date.replace(tzinfo=self.default_timezone)
            return date

        if issues is not None:
            issues.log("invalid-date", fieldvalue, f"{fieldvalue!r} is not a date")

        return None
