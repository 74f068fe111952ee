import logging

import pytest

from tv_grep.model import Channel, Programme


def pytest_configure(config):
    # Set up a logger for the tests
    logging.basicConfig(
        level=logging.DEBUG, format="%(asctime)s [%(levelname)s] %(message)s"
    )


@pytest.fixture
def make_programme():
    def make(channel, start, stop=None, clumpidx=None, **fields):
        programme = Programme()
        programme.add("start", start)
        if stop is not None:
            programme.add("stop", stop)
        programme.add("channel", channel)
        if clumpidx is not None:
            programme.add("clumpidx", clumpidx)
        for name, values in fields.items():
            name = name.replace("_", "-")
            if not isinstance(values, list):
                values = [values]
            for value in values:
                programme.add(name, value)
        return programme

    return make


@pytest.fixture
def make_channel():
    def make(id, *names):
        channel = Channel()
        channel.add("id", id)
        for name in names:
            channel.add("display-name", name)
        return channel

    return make


@pytest.fixture
def listings(make_channel, make_programme):
    """
    two channels, with a clump of two programmes on the second
    """
    channels = {
        "A": make_channel("A", "News24"),
        "B": make_channel("B", "SportsMax"),
    }
    programmes = [
        make_programme(
            "A", "20261018090000 +0000", "20261018093000 +0000", title="Headlines"
        ),
        make_programme(
            "B",
            "20261018090000 +0000",
            "20261018100000 +0000",
            clumpidx="0/2",
            title="Match Report",
        ),
        make_programme(
            "B",
            "20261018090000 +0000",
            "20261018100000 +0000",
            clumpidx="1/2",
            title="Highlights",
        ),
    ]
    return channels, programmes
