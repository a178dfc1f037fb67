import pytest

from lmscorer.data.vocab import SymbolTable
from lmscorer.decoding.dictionary import add_word_to_dictionary, compile_dictionary
from lmscorer.fst.acceptor import accepts, is_deterministic, new_acceptor

from conftest import ENGLISH


def _ids(scorer, text):
    return scorer.symbols.lookup(text)


def test_fill_dictionary_counts_spellable_words(word_scorer):
    accepted = word_scorer.fill_dictionary(False)
    # reserved tokens contain '<' and are skipped
    assert accepted == 3
    dictionary = word_scorer.dictionary
    for word in ("the", "cat", "sat"):
        assert accepts(dictionary, _ids(word_scorer, word))
    assert not accepts(dictionary, _ids(word_scorer, "ca"))
    assert not accepts(dictionary, _ids(word_scorer, "the "))


def test_dictionary_is_deterministic_and_minimal(word_scorer):
    word_scorer.fill_dictionary(False)
    dictionary = word_scorer.dictionary
    assert is_deterministic(dictionary)
    # "cat" and "sat" share "at"; "the" is separate
    assert dictionary.num_states() == 6


def test_fill_dictionary_with_space(word_scorer):
    word_scorer.fill_dictionary(True)
    dictionary = word_scorer.dictionary
    assert accepts(dictionary, _ids(word_scorer, "cat "))
    assert not accepts(dictionary, _ids(word_scorer, "cat"))


def test_fill_dictionary_replaces_previous(word_scorer):
    word_scorer.fill_dictionary(False)
    first = word_scorer.dictionary
    word_scorer.fill_dictionary(True)
    assert word_scorer.dictionary is not first


def test_add_space_without_boundary_symbol(char_arpa):
    from lmscorer.decoding.scorer import Scorer

    scorer = Scorer(0.5, 1.0, char_arpa)
    scorer.set_char_map(["a", "b"])
    with pytest.raises(ValueError):
        scorer.fill_dictionary(True)
    assert scorer.fill_dictionary(False) == 2


def test_unspellable_and_empty_words_are_skipped():
    symbols = SymbolTable(ENGLISH)
    fst = new_acceptor()
    assert not add_word_to_dictionary("", symbols, False, fst)
    assert not add_word_to_dictionary("Cat", symbols, False, fst)
    assert add_word_to_dictionary("don't", symbols, False, fst)
    assert accepts(fst, symbols.lookup("don't"))


def test_compile_with_no_words():
    acceptor, accepted = compile_dictionary(["<s>", "</s>"], SymbolTable(ENGLISH))
    assert accepted == 0
    assert acceptor.num_states() == 0
