"""Vocabulary readers for ARPA files and plain word lists."""
from __future__ import annotations

import gzip
from pathlib import Path
from typing import IO


def _open_text(path: str | Path) -> IO[str]:
    p = Path(path)
    if p.suffix == ".gz":
        return gzip.open(p, "rt", encoding="utf-8", errors="replace")
    return p.open("r", encoding="utf-8", errors="replace")


def read_arpa_vocabulary(path: str | Path, unk: str = "<unk>") -> list[str]:
    """Unigrams of an ARPA file in file order, with ``unk`` at index 0."""
    words = [unk]
    in_unigrams = False
    with _open_text(path) as f:
        for line in f:
            line = line.strip()
            if line == "\\1-grams:":
                in_unigrams = True
                continue
            if line.startswith("\\") and in_unigrams:
                break
            if in_unigrams and line:
                fields = line.split()
                if len(fields) >= 2 and fields[1] != unk:
                    words.append(fields[1])
    if len(words) == 1:
        raise ValueError(f"No unigrams found in ARPA file: {path}")
    return words


def read_word_list(path: str | Path, unk: str = "<unk>") -> list[str]:
    """One word per line; ``unk`` is moved to index 0."""
    words = [unk]
    with Path(path).open("r", encoding="utf-8") as f:
        for line in f:
            w = line.strip()
            if w and w != unk:
                words.append(w)
    return words
