from __future__ import annotations

import logging
from typing import Iterable

import pynini
from tqdm import tqdm

from lmscorer.data.vocab import SymbolTable
from lmscorer.fst.acceptor import add_path, new_acceptor, num_arcs, optimize

logger = logging.getLogger(__name__)


def add_word_to_dictionary(word: str, symbols: SymbolTable, add_space: bool, fst: pynini.Fst) -> bool:
    """Insert ``word`` as an accepting path. Returns False when it cannot be spelled."""
    ids = symbols.lookup(word)
    if not ids:
        return False
    if add_space:
        if symbols.space_id is None:
            raise ValueError("add_space requires a space symbol in the alphabet")
        ids.append(symbols.space_id)
    add_path(fst, ids)
    return True


def compile_dictionary(
    vocabulary: Iterable[str],
    symbols: SymbolTable,
    *,
    add_space: bool = False,
    show_progress: bool = False,
) -> tuple[pynini.Fst, int]:
    """Build a deterministic, minimal acceptor over the spellable vocabulary words.

    Returns the acceptor and the number of words that were inserted.
    """

    raw = new_acceptor()
    accepted = 0
    for word in tqdm(vocabulary, desc="dictionary", disable=not show_progress):
        if add_word_to_dictionary(word, symbols, add_space, raw):
            accepted += 1

    fst = optimize(raw)
    logger.debug("Dictionary: %d words, %d states, %d arcs", accepted, fst.num_states(), num_arcs(fst))
    return fst, accepted
