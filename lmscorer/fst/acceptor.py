"""Dictionary acceptors on top of OpenFst (pynini).

OpenFst reserves label 0 for epsilon, so symbol id ``i`` travels on arcs as
label ``i + 1``.
"""
from __future__ import annotations

from typing import Iterable

import pynini

NO_STATE = -1
WEIGHT_TYPE = "tropical"


def symbol_label(symbol_id: int) -> int:
    return int(symbol_id) + 1


def new_acceptor() -> pynini.Fst:
    return pynini.Fst(arc_type="standard")


def add_path(fst: pynini.Fst, symbol_ids: Iterable[int]) -> int:
    """Add a fresh chain of states from the start state accepting ``symbol_ids``.

    Returns the final state of the chain.
    """
    if fst.num_states() == 0:
        fst.set_start(fst.add_state())
    one = pynini.Weight.one(WEIGHT_TYPE)
    src = fst.start()
    for symbol_id in symbol_ids:
        dst = fst.add_state()
        label = symbol_label(symbol_id)
        fst.add_arc(src, pynini.Arc(label, label, one, dst))
        src = dst
    fst.set_final(src, one)
    return src


def optimize(fst: pynini.Fst) -> pynini.Fst:
    """Epsilon removal, determinization and minimization; returns a new Fst."""
    if fst.num_states() == 0:
        return fst.copy()
    fst.rmepsilon()
    det = pynini.determinize(fst)
    det.minimize()
    return det


def is_final(fst: pynini.Fst, state: int) -> bool:
    return fst.final(state).to_string() != pynini.Weight.zero(fst.weight_type()).to_string()


def is_deterministic(fst: pynini.Fst) -> bool:
    for state in fst.states():
        labels = [arc.ilabel for arc in fst.arcs(state)]
        if 0 in labels or len(labels) != len(set(labels)):
            return False
    return True


def next_state(fst: pynini.Fst, state: int, symbol_id: int) -> int:
    """Follow ``symbol_id`` from ``state`` in a deterministic acceptor; NO_STATE if there is no arc."""
    label = symbol_label(symbol_id)
    for arc in fst.arcs(state):
        if arc.ilabel == label:
            return arc.nextstate
    return NO_STATE


def accepts(fst: pynini.Fst, symbol_ids: Iterable[int]) -> bool:
    state = fst.start()
    if state == NO_STATE:
        return False
    for symbol_id in symbol_ids:
        state = next_state(fst, state, symbol_id)
        if state == NO_STATE:
            return False
    return is_final(fst, state)


def num_arcs(fst: pynini.Fst) -> int:
    return sum(fst.num_arcs(s) for s in fst.states())
