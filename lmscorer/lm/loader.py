from __future__ import annotations

from pathlib import Path

from lmscorer.lm.base import LanguageModel


def load_language_model(
    path: str | Path,
    *,
    vocab_path: str | Path | None = None,
    unk: str = "<unk>",
) -> LanguageModel:
    """Load an ARPA or binary n-gram model through KenLM.

    Raises FileNotFoundError when the model file is missing.
    """

    p = Path(path)
    if not p.exists():
        raise FileNotFoundError(f"Language model not found: {p}")

    from lmscorer.lm.kenlm_model import KenLMModel

    return KenLMModel(p, vocab_path=vocab_path, unk=unk)
