import pytest

from lmscorer.data.vocab import SymbolTable, is_character_based, load_alphabet
from lmscorer.lm.base import ReservedTokens


def test_single_codepoint_vocabulary_is_character_based():
    assert is_character_based(["<unk>", "<s>", "</s>", "a", "b", "é", "日"])


def test_multi_codepoint_entry_makes_vocabulary_word_based():
    assert not is_character_based(["<unk>", "<s>", "</s>", "a", "ab", "b"])
    assert not is_character_based(["<unk>", "日本"])


def test_reserved_tokens_are_ignored():
    assert is_character_based(["<unk>", "<s>", "</s>"])
    reserved = ReservedTokens(unk="[UNK]", bos="[BOS]", eos="[EOS]")
    assert is_character_based(["[UNK]", "[BOS]", "[EOS]", "x"], reserved)
    assert not is_character_based(["<unk>", "x"], reserved)


def test_bytes_entries_are_decoded_as_utf8():
    assert is_character_based([b"<s>", "é".encode("utf-8")])
    assert not is_character_based(["hé".encode("utf-8")])


def test_symbol_table_space_id():
    assert SymbolTable(["a", " ", "b"]).space_id == 1
    assert SymbolTable(["a", "b"]).space_id is None


def test_symbol_table_round_trip():
    table = SymbolTable(list(" abc'"))
    ids = [1, 2, 0, 3, 4, 1]
    text = table.ids_to_text(ids)
    assert text == "ab c'a"
    assert table.lookup(text) == ids


def test_lookup_rejects_unknown_characters():
    table = SymbolTable(list("ab"))
    assert table.lookup("abz") is None
    assert table.encode("abz") == [0, 1]


def test_split_labels():
    table = SymbolTable(list(" abc"))
    ids = table.lookup("ab  c")
    assert table.split_labels(ids, character_based=False) == ["ab", "c"]
    assert table.split_labels(ids, character_based=True) == ["a", "b", " ", " ", "c"]
    assert table.split_labels([], character_based=False) == []


def test_load_alphabet(tmp_path):
    p = tmp_path / "alphabet.txt"
    p.write_text("# comment\n \na\n\\#\nb\n", encoding="utf-8")
    table = load_alphabet(p)
    assert table.tokens == [" ", "a", "#", "b"]
    assert table.space_id == 0


def test_load_alphabet_empty(tmp_path):
    p = tmp_path / "alphabet.txt"
    p.write_text("# only comments\n", encoding="utf-8")
    with pytest.raises(ValueError):
        load_alphabet(p)
