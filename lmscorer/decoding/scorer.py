"""External n-gram scorer for CTC prefix beam search.

The beam search keeps its hypotheses in a shared ``PathTrie``. Whenever a
hypothesis grows by a word (word-level LM) or by a character (character-level
LM), it asks the scorer for ``alpha * log10 P(token | context) + beta``.
"""
from __future__ import annotations

import logging
from concurrent.futures import ThreadPoolExecutor
from pathlib import Path
from typing import Sequence

import numpy as np
import pynini

from lmscorer.data.vocab import SymbolTable, is_character_based
from lmscorer.decoding.dictionary import compile_dictionary
from lmscorer.decoding.prefix_tree import PathTrie, collect_backward, stop_after, stop_at_boundary
from lmscorer.lm.base import OOV_INDEX, LanguageModel, ReservedTokens
from lmscorer.lm.loader import load_language_model

logger = logging.getLogger(__name__)


class Scorer:
    def __init__(
        self,
        alpha: float,
        beta: float,
        lm_path: str | Path,
        *,
        vocab_path: str | Path | None = None,
        reserved: ReservedTokens = ReservedTokens(),
    ):
        self.alpha = float(alpha)
        self.beta = float(beta)
        self.reserved = reserved
        self.symbols: SymbolTable | None = None
        self.dictionary: pynini.Fst | None = None
        self._vocab_path = vocab_path
        self.load_lm(lm_path)

    # setup

    def load_lm(self, path: str | Path) -> None:
        """Load the model and classify its vocabulary.

        A missing file raises FileNotFoundError; there is no fallback model.
        """
        model = load_language_model(path, vocab_path=self._vocab_path, unk=self.reserved.unk)
        self.set_model(model)
        logger.info(
            "Loaded LM from %s: order=%d vocab=%d character_based=%s",
            path,
            self.max_order,
            self.dict_size,
            self.is_character_based,
        )

    def set_model(self, model: LanguageModel) -> None:
        self.model = model
        self.max_order = int(model.order)
        self.vocabulary = list(model.vocabulary)
        self.is_character_based = is_character_based(self.vocabulary, self.reserved)

    def reset_params(self, alpha: float, beta: float) -> None:
        self.alpha = float(alpha)
        self.beta = float(beta)

    def set_char_map(self, char_list: Sequence[str]) -> None:
        self.symbols = SymbolTable(list(char_list))

    @property
    def dict_size(self) -> int:
        return len(self.vocabulary)

    @property
    def space_id(self) -> int | None:
        return None if self.symbols is None else self.symbols.space_id

    def _require_symbols(self) -> SymbolTable:
        if self.symbols is None:
            raise RuntimeError("set_char_map() must be called before using the symbol table")
        return self.symbols

    # scoring

    def conditional_log_prob(self, tokens: Sequence[str]) -> float:
        """log10 P(tokens[-1] | tokens[:-1]), or the OOV score if any token is unknown."""
        if not tokens:
            raise ValueError("conditional_log_prob() needs at least one token")
        state = self.model.null_state()
        log_prob = 0.0
        for token in tokens:
            if self.model.index(token) == OOV_INDEX:
                return self.reserved.oov_score
            log_prob, state = self.model.score(state, token)
        return log_prob

    def sentence_log_prob(self, tokens: Sequence[str]) -> float:
        bos = self.reserved.bos
        if not tokens:
            sentence = [bos] * self.max_order
        else:
            sentence = [bos] * (self.max_order - 1) + list(tokens)
        sentence.append(self.reserved.eos)
        return self.full_sequence_log_prob(sentence)

    def full_sequence_log_prob(self, tokens: Sequence[str]) -> float:
        """Sum of the conditional scores of every ``max_order`` wide window."""
        n = self.max_order
        if len(tokens) < n:
            raise ValueError(f"Sequence of length {len(tokens)} is shorter than the LM order {n}")
        return sum(self.conditional_log_prob(tokens[i : i + n]) for i in range(len(tokens) - n + 1))

    # prefix tree

    def vec2str(self, ids: Sequence[int]) -> str:
        return self._require_symbols().ids_to_text(ids)

    def split_labels(self, labels: Sequence[int]) -> list[str]:
        return self._require_symbols().split_labels(labels, character_based=self.is_character_based)

    def make_ngram(self, prefix: PathTrie) -> list[str]:
        """The ``max_order`` most recent tokens ending at ``prefix``, oldest first.

        Missing history is filled with the sentence-start token.
        """
        symbols = self._require_symbols()
        if self.is_character_based:
            stop = stop_after(1)
        else:
            stop = stop_at_boundary(symbols.space_id)

        ngram: list[str] = []
        node = prefix
        for order in range(self.max_order):
            ids, stopped = collect_backward(node, stop)
            ngram.append(symbols.ids_to_text(reversed(ids)))
            if stopped.is_root:
                ngram.extend([self.reserved.bos] * (self.max_order - order - 1))
                break
            # word mode skips the boundary symbol itself
            node = stopped if self.is_character_based else stopped.parent

        ngram.reverse()
        return ngram

    def lm_bonus(self, prefix: PathTrie) -> float:
        return self.alpha * self.conditional_log_prob(self.make_ngram(prefix)) + self.beta

    def score_prefixes(self, prefixes: Sequence[PathTrie], *, max_workers: int | None = None) -> np.ndarray:
        """``lm_bonus`` for many candidates; runs on a thread pool when ``max_workers`` > 1."""
        if max_workers is None or max_workers <= 1:
            scores = [self.lm_bonus(p) for p in prefixes]
        else:
            with ThreadPoolExecutor(max_workers=max_workers) as pool:
                scores = list(pool.map(self.lm_bonus, prefixes))
        return np.asarray(scores, dtype=np.float64)

    # dictionary

    def fill_dictionary(self, add_space: bool, *, show_progress: bool = False) -> int:
        """Compile the vocabulary into ``self.dictionary``; returns the number of words kept."""
        symbols = self._require_symbols()
        if add_space and symbols.space_id is None:
            raise ValueError("add_space requires a space symbol in the alphabet")
        acceptor, accepted = compile_dictionary(
            self.vocabulary, symbols, add_space=add_space, show_progress=show_progress
        )
        logger.info("Vocab Size %d", accepted)
        self.dictionary = acceptor
        return accepted
