import logging

from tv_grep.log import IssueLog
from tv_grep.phase import ClumpRepairPhase, LoadPhase, clump_groups


def programmes_in_clump(make_programme, size, channel="B", start="20261018090000"):
    return [
        make_programme(channel, start, clumpidx=f"{i}/{size}", title=f"part {i}")
        for i in range(size)
    ]


def run(programmes, drop):
    blocks = list(LoadPhase(programmes).process())
    for block in blocks:
        block["include"] = block["entry-number"] not in drop
    phase = ClumpRepairPhase(clump_groups(programmes))
    return list(phase.process(iter(blocks)))


def test_clump_groups(make_programme):
    programmes = [
        make_programme("A", "20261018090000"),
        make_programme("B", "20261018090000", clumpidx="1/2"),
        make_programme("B", "20261018090000", clumpidx="0/2"),
        make_programme("B", "20261018100000", clumpidx="0/1"),
    ]
    assert clump_groups(programmes) == {
        ("B", "20261018090000"): [3, 2],
        ("B", "20261018100000"): [4],
    }


def test_renumber_survivors(make_programme):
    programmes = programmes_in_clump(make_programme, 4)
    blocks = run(programmes, drop={2})

    assert len(blocks) == 4
    assert [p.clumpidx for p in programmes] == [(0, 3), (1, 4), (1, 3), (2, 3)]


def test_sole_survivor_loses_clumpidx(make_programme):
    programmes = programmes_in_clump(make_programme, 3)
    run(programmes, drop={1, 3})

    assert programmes[1].clumpidx is None
    assert "clumpidx" not in programmes[1]


def test_untouched_when_nothing_dropped(make_programme):
    programmes = programmes_in_clump(make_programme, 3)
    run(programmes, drop=set())
    assert [p.clumpidx for p in programmes] == [(0, 3), (1, 3), (2, 3)]


def test_repair_for_every_number_dropped(make_programme):
    for size in range(2, 6):
        for dropped in range(size):
            programmes = programmes_in_clump(make_programme, size)
            drop = set(range(1, dropped + 1))
            run(programmes, drop=drop)

            survivors = [p for n, p in enumerate(programmes, start=1) if n not in drop]
            left = size - dropped
            if left == 1:
                assert survivors[0].clumpidx is None
            else:
                assert [p.clumpidx for p in survivors] == [(i, left) for i in range(left)]
                assert [p.get("title") for p in survivors] == [
                    f"part {i}" for i in range(dropped, size)
                ]


def test_clumps_on_other_channels_untouched(make_programme):
    programmes = programmes_in_clump(make_programme, 2, channel="B")
    programmes += programmes_in_clump(make_programme, 2, channel="C")
    run(programmes, drop={1})

    assert programmes[1].clumpidx is None
    assert [p.clumpidx for p in programmes[2:]] == [(0, 2), (1, 2)]


def test_bad_clumpidx_left_out_of_clumps(make_programme, caplog):
    programmes = [
        make_programme("B", "20261018090000", clumpidx="1/1", title="odd"),
        make_programme("B", "20261018090000", clumpidx="x/2", title="odder"),
        make_programme("C", "20261018090000", clumpidx="0/2"),
        make_programme("C", "20261018090000", clumpidx="1/2"),
    ]
    issues = IssueLog()

    with caplog.at_level(logging.WARNING):
        groups = clump_groups(programmes, issues=issues)

    assert groups == {("C", "20261018090000"): [3, 4]}
    assert issues.issue_types() == ["invalid-clumpidx", "invalid-clumpidx"]
    assert [row["value"] for row in issues.rows] == ["1/1", "x/2"]
    assert issues.rows[0]["channel"] == "B"
    assert len([r for r in caplog.records if r.levelno == logging.WARNING]) == 2


def test_bad_clumpidx_passed_through(make_programme):
    programmes = [make_programme("B", "20261018090000", clumpidx="1/1", title="odd")]
    programmes += programmes_in_clump(make_programme, 2, channel="C")
    blocks = run(programmes, drop={2})

    assert [block["row"] for block in blocks] == programmes
    assert programmes[0].get("clumpidx") == "1/1"
    assert programmes[2].clumpidx is None
