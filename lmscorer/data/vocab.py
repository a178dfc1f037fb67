"""Decoding alphabet and LM vocabulary helpers."""
from __future__ import annotations

from pathlib import Path
from typing import Iterable

from lmscorer.lm.base import ReservedTokens

SPACE = " "


def is_character_based(vocabulary: Iterable[str | bytes], reserved: ReservedTokens = ReservedTokens()) -> bool:
    """True when every non-reserved vocabulary entry is a single codepoint."""
    character_based = True
    for word in vocabulary:
        if isinstance(word, bytes):
            word = word.decode("utf-8", errors="replace")
        if word in reserved:
            continue
        if len(word) > 1:
            character_based = False
    return character_based


class SymbolTable:
    """Decoding alphabet: symbol id <-> output string.

    ``space_id`` is the id of the single-space symbol, or None when the
    alphabet has no word boundary.
    """

    def __init__(self, tokens: list[str]):
        self.tokens = list(tokens)
        self._tok2id: dict[str, int] = {}
        self.space_id: int | None = None
        for i, t in enumerate(self.tokens):
            self._tok2id.setdefault(t, i)
            if t == SPACE and self.space_id is None:
                self.space_id = i

    def __len__(self) -> int:
        return len(self.tokens)

    def ids_to_text(self, ids: Iterable[int]) -> str:
        return "".join(self.tokens[int(i)] for i in ids)

    def lookup(self, text: str) -> list[int] | None:
        """Ids for each codepoint of ``text``; None if any is not in the alphabet."""
        ids = []
        for ch in text:
            i = self._tok2id.get(ch)
            if i is None:
                return None
            ids.append(i)
        return ids

    def encode(self, text: str) -> list[int]:
        """Encode text as list of ids, skipping unknown characters."""
        return [self._tok2id[ch] for ch in text if ch in self._tok2id]

    def split_labels(self, ids: Iterable[int], *, character_based: bool) -> list[str]:
        s = self.ids_to_text(ids)
        if not s:
            return []
        if character_based:
            return list(s)
        return [w for w in s.split(SPACE) if w]


def load_alphabet(path: str | Path) -> SymbolTable:
    """Read an alphabet file: one symbol per line, ``#`` comments, ``\\#`` for a literal hash."""
    tokens: list[str] = []
    with Path(path).open("r", encoding="utf-8") as f:
        for line in f:
            line = line.rstrip("\r\n")
            if line.startswith("\\#"):
                line = "#" + line[2:]
            elif line.startswith("#") or not line:
                continue
            tokens.append(line)
    if not tokens:
        raise ValueError(f"Alphabet file has no symbols: {path}")
    return SymbolTable(tokens)
