import functools
import logging


def chain_phases(phases):
    def add(f, g):
        return lambda x: g.process(f(x))

    return functools.reduce(add, phases, lambda phase: phase)


def run_pipeline(*phases):
    """
    run the stream through each of the phases, returning the blocks left at the end
    """
    logging.debug(f"run_pipeline {phases}")
    chain = chain_phases([phase for phase in phases if phase])
    return list(chain(None))
