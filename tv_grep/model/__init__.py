from .record import Occurrence, Record, Channel, Programme  # noqa: F401
