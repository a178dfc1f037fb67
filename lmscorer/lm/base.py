from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Any

OOV_INDEX = 0


@dataclass(frozen=True)
class ReservedTokens:
    """Reserved vocabulary entries and the score given to unknown words."""

    unk: str = "<unk>"
    bos: str = "<s>"
    eos: str = "</s>"
    oov_score: float = -1000.0

    def __contains__(self, token: object) -> bool:
        return token in (self.unk, self.bos, self.eos)


class LanguageModel(ABC):
    """Stateful n-gram model queried one word at a time.

    States are opaque values. ``score`` never mutates the state it is given and
    always hands back a new one, so callers may keep several states alive and
    query them from different threads.
    """

    @property
    @abstractmethod
    def order(self) -> int:
        ...

    @property
    @abstractmethod
    def vocabulary(self) -> list[str]:
        ...

    @abstractmethod
    def index(self, word: str) -> int:
        """Vocabulary index of ``word``, ``OOV_INDEX`` when unknown."""

    @abstractmethod
    def null_state(self) -> Any:
        """State with no conditioning context (no implicit ``<s>``)."""

    @abstractmethod
    def score(self, state: Any, word: str) -> tuple[float, Any]:
        """Return ``(log10 P(word | state), next_state)``."""

    def __contains__(self, word: object) -> bool:
        return isinstance(word, str) and self.index(word) != OOV_INDEX
