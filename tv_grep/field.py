"""
access to the values of a programme or channel field

A field is absent when it has no occurrences, present but empty when an
occurrence has empty text, and present otherwise.
"""


def occurrences(record, fieldname):
    return record.fields.get(fieldname, [])


def texts(record, fieldname):
    return [occurrence.text for occurrence in occurrences(record, fieldname)]


def is_present(record, fieldname):
    return len(occurrences(record, fieldname)) > 0


def as_texts(record):
    """
    every field of a record reduced to its texts, in field order
    """
    return {fieldname: texts(record, fieldname) for fieldname in record.fields}
