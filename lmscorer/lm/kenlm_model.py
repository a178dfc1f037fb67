from __future__ import annotations

import logging
from pathlib import Path

import kenlm

from lmscorer.lm.arpa import read_arpa_vocabulary, read_word_list
from lmscorer.lm.base import OOV_INDEX, LanguageModel

logger = logging.getLogger(__name__)

_ARPA_SUFFIXES = (".arpa", ".gz")


class KenLMModel(LanguageModel):
    """KenLM-backed model (ARPA or binary).

    The Python bindings do not enumerate the vocabulary, so it is read from the
    ARPA unigram section or, for binary models, from a word list file.
    """

    def __init__(self, path: str | Path, *, vocab_path: str | Path | None = None, unk: str = "<unk>"):
        p = Path(path)
        if not p.exists():
            raise FileNotFoundError(str(p))

        if vocab_path is not None:
            vocab = read_word_list(vocab_path, unk=unk)
        elif p.suffix in _ARPA_SUFFIXES:
            vocab = read_arpa_vocabulary(p, unk=unk)
        else:
            raise ValueError(f"Binary KenLM model {p} needs a vocabulary word list (lm.vocab_path)")

        self.path = p
        self._model = kenlm.Model(str(p))
        self._vocab = vocab
        self._index = {w: i for i, w in enumerate(vocab)}
        logger.debug("Loaded KenLM model %s (order %d, %d words)", p, self._model.order, len(vocab))

    @property
    def order(self) -> int:
        return int(self._model.order)

    @property
    def vocabulary(self) -> list[str]:
        return self._vocab

    def index(self, word: str) -> int:
        if word not in self._model:
            return OOV_INDEX
        return self._index.get(word, OOV_INDEX)

    def null_state(self) -> kenlm.State:
        state = kenlm.State()
        self._model.NullContextWrite(state)
        return state

    def score(self, state: kenlm.State, word: str) -> tuple[float, kenlm.State]:
        next_state = kenlm.State()
        log10_prob = self._model.BaseScore(state, word, next_state)
        return float(log10_prob), next_state
