from tv_grep.phase.phase import Phase
from tv_grep.pipeline import chain_phases, run_pipeline


class Numbers(Phase):
    def process(self, stream=None):
        for number in range(1, 4):
            yield {"row": number}


class Double(Phase):
    def process(self, stream):
        for block in stream:
            block["row"] *= 2
            yield block


def test_chain_phases():
    chain = chain_phases([Numbers(), Double(), Phase()])
    assert [block["row"] for block in chain(None)] == [2, 4, 6]


def test_run_pipeline_skips_missing_phases():
    blocks = run_pipeline(Numbers(), None, Double())
    assert [block["row"] for block in blocks] == [2, 4, 6]
