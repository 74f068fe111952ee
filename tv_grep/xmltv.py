"""
read and write XMLTV listings

Listings are passed around as (encoding, credits, channels, programmes):
the document encoding, the attributes of the <tv> element, a dict of
channel id to Channel, and the programmes in document order.
"""

import copy
import logging
import re
import sys
import xml.etree.ElementTree as ET

from .errors import DataError, DuplicateChannelError, OutputError
from .model import Channel, Programme

DEFAULT_ENCODING = "UTF-8"
DOCTYPE = '<!DOCTYPE tv SYSTEM "xmltv.dtd">'

encoding_pattern = re.compile(rb"""^\s*<\?xml[^>]*encoding=["']([A-Za-z0-9._-]+)["']""")


def detect_encoding(content):
    match = encoding_pattern.match(content)
    if match:
        return match.group(1).decode("ascii")
    return DEFAULT_ENCODING


def element_text(element):
    if len(element):
        return " ".join(text.strip() for text in element.itertext() if text.strip())
    return element.text or ""


def parse_record(element, record):
    for name, value in element.attrib.items():
        record.add(name, value, is_attribute=True)
    for child in element:
        record.add(
            child.tag,
            element_text(child),
            attributes=dict(child.attrib),
            element=child,
        )
    return record


def parse_channel(element):
    channel = parse_record(element, Channel())
    if channel.id is None:
        raise DataError("channel without an id")
    return channel


def parse_programme(element):
    programme = parse_record(element, Programme())
    for name in ["channel", "start"]:
        if programme.get(name) is None:
            raise DataError(f"programme without a {name}")
    return programme


def add_channel(channels, channel):
    existing = channels.get(channel.id)
    if existing is None:
        channels[channel.id] = channel
    elif existing != channel:
        raise DuplicateChannelError(channel.id)
    else:
        logging.debug(f"ignoring repeated channel {channel.id}")


def parse(content):
    try:
        root = ET.fromstring(content)
    except ET.ParseError as e:
        raise DataError(f"bad XMLTV document: {e}")

    if root.tag != "tv":
        raise DataError(f"bad XMLTV document: root element is <{root.tag}> not <tv>")

    channels = {}
    programmes = []
    for element in root:
        if element.tag == "channel":
            add_channel(channels, parse_channel(element))
        elif element.tag == "programme":
            programmes.append(parse_programme(element))
        else:
            logging.warning(f"ignoring unknown element <{element.tag}>")

    return detect_encoding(content), dict(root.attrib), channels, programmes


def read(path=None, f=None):
    if not f:
        try:
            with open(path, "rb") as f:
                content = f.read()
        except OSError as e:
            raise DataError(f"can't read {path}: {e.strerror}")
    else:
        content = f.read()
    logging.debug(f"read {len(content)} bytes from {path or f}")
    return parse(content)


def read_files(paths):
    """
    read and merge listings, reading standard input when there are no paths
    """
    paths = list(paths) or ["-"]

    encoding, credits, channels, programmes = None, None, {}, []
    for path in paths:
        if path == "-":
            data = read(f=sys.stdin.buffer)
        else:
            data = read(path)

        if encoding is None:
            encoding, credits = data[0], data[1]
        elif data[0].lower() != encoding.lower():
            logging.info(f"{path} is {data[0]}, output will be {encoding}")

        for channel in data[2].values():
            add_channel(channels, channel)
        programmes.extend(data[3])

    return encoding, credits, channels, programmes


def record_element(record):
    element = ET.Element(record.tag)
    for name, occurrences in record.fields.items():
        for occurrence in occurrences:
            if occurrence.is_attribute or name in record.attribute_names:
                element.set(name, occurrence.text)
            elif occurrence.element is not None:
                child = copy.deepcopy(occurrence.element)
                child.tail = None
                element.append(child)
            else:
                child = ET.SubElement(element, name, occurrence.attributes)
                child.text = occurrence.text or None
    return element


def render(data):
    encoding, credits, channels, programmes = data

    tv = ET.Element("tv", credits or {})
    for channel in channels.values():
        tv.append(record_element(channel))
    for programme in programmes:
        tv.append(record_element(programme))
    ET.indent(tv)

    text = "\n".join(
        [
            f'<?xml version="1.0" encoding="{encoding}"?>',
            DOCTYPE,
            "",
            ET.tostring(tv, encoding="unicode"),
            "",
        ]
    )
    return text.encode(encoding, errors="xmlcharrefreplace")


def write(data, path=None, f=None):
    """
    write listings to a path, or a binary file object, standard output by default

    The whole document is rendered before anything is written.
    """
    content = render(data)

    if path:
        try:
            with open(path, "wb") as f:
                f.write(content)
        except OSError as e:
            raise OutputError(f"can't write {path}: {e.strerror}")
        return

    f = f or sys.stdout.buffer
    try:
        f.write(content)
        f.flush()
    except OSError as e:
        raise OutputError(f"can't write output: {e.strerror}")
