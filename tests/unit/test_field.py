from tv_grep.field import as_texts, is_present, occurrences, texts


def test_absent_field(make_programme):
    programme = make_programme("A", "20261018090000")
    assert occurrences(programme, "desc") == []
    assert texts(programme, "desc") == []
    assert not is_present(programme, "desc")


def test_present_but_empty_field(make_programme):
    programme = make_programme("A", "20261018090000", desc="")
    assert texts(programme, "desc") == [""]
    assert is_present(programme, "desc")


def test_multiple_occurrences(make_programme):
    programme = make_programme("A", "20261018090000", title=["Le Journal", "The News"])
    assert texts(programme, "title") == ["Le Journal", "The News"]


def test_attributes_are_fields(make_programme):
    programme = make_programme("A", "20261018090000", "20261018100000")
    assert texts(programme, "stop") == ["20261018100000"]
    assert texts(programme, "channel") == ["A"]


def test_as_texts_keeps_field_order(make_programme):
    programme = make_programme("A", "20261018090000", title="News", desc="")
    assert list(as_texts(programme).items()) == [
        ("start", ["20261018090000"]),
        ("channel", ["A"]),
        ("title", ["News"]),
        ("desc", [""]),
    ]
