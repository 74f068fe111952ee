import pytest

from tv_grep.errors import DataError
from tv_grep.model import Channel, Programme


def test_programme_properties(make_programme):
    programme = make_programme("A", "20261018090000", clumpidx="1/3")
    assert programme.channel == "A"
    assert programme.start == "20261018090000"
    assert programme.stop is None
    assert programme.clumpidx == (1, 3)


def test_set_clumpidx(make_programme):
    programme = make_programme("A", "20261018090000", clumpidx="2/3")
    programme.clumpidx = (0, 2)
    assert programme.get("clumpidx") == "0/2"

    programme.clumpidx = None
    assert "clumpidx" not in programme
    assert programme.clumpidx is None


@pytest.mark.parametrize("value", ["1", "2/2", "a/b", "0/0", "-1/2"])
def test_bad_clumpidx(make_programme, value):
    programme = make_programme("A", "20261018090000", clumpidx=value)
    with pytest.raises(DataError):
        programme.clumpidx


def test_records_compare_by_fields(make_channel):
    assert make_channel("A", "One") == make_channel("A", "One")
    assert make_channel("A", "One") != make_channel("A", "Two")
    assert Channel() != Programme()
