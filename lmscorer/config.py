from __future__ import annotations

import copy
import json
from dataclasses import asdict, dataclass, field
from pathlib import Path
from typing import Any, Mapping

import yaml

from lmscorer.lm.base import ReservedTokens


class ConfigError(RuntimeError):
    pass


def load_yaml(path: str | Path) -> dict[str, Any]:
    p = Path(path)
    if not p.exists():
        raise FileNotFoundError(str(p))
    with p.open("r", encoding="utf-8") as f:
        data = yaml.safe_load(f)
    if not isinstance(data, dict):
        raise ConfigError(f"Top-level YAML must be a mapping; got {type(data)}")
    return data


def deep_update(base: dict[str, Any], patch: Mapping[str, Any]) -> dict[str, Any]:
    """Recursively update nested dicts."""
    out = copy.deepcopy(base)
    for k, v in patch.items():
        if isinstance(v, Mapping) and isinstance(out.get(k), dict):
            out[k] = deep_update(out[k], v)
        else:
            out[k] = copy.deepcopy(v)
    return out


def to_pretty_json(obj: Any) -> str:
    return json.dumps(obj, indent=2, sort_keys=True, ensure_ascii=True)


@dataclass(frozen=True)
class ScorerConfig:
    """Everything needed to build a Scorer for one decoding session."""

    lm_path: Path
    alphabet_path: Path
    vocab_path: Path | None = None
    alpha: float = 0.5
    beta: float = 1.0
    add_space: bool = False
    reserved: ReservedTokens = field(default_factory=ReservedTokens)
    log_level: str = "INFO"

    def dump(self) -> str:
        return to_pretty_json({k: str(v) if isinstance(v, Path) else v for k, v in asdict(self).items()})

    def build_scorer(self):
        from lmscorer.data.vocab import load_alphabet
        from lmscorer.decoding.scorer import Scorer

        if not self.alphabet_path.exists():
            raise ConfigError(f"Alphabet file not found: {self.alphabet_path}")
        symbols = load_alphabet(self.alphabet_path)

        scorer = Scorer(
            self.alpha,
            self.beta,
            self.lm_path,
            vocab_path=self.vocab_path,
            reserved=self.reserved,
        )
        scorer.set_char_map(symbols.tokens)
        return scorer


def _section(raw: Mapping[str, Any], key: str) -> dict[str, Any]:
    sec = raw.get(key, {})
    if not isinstance(sec, dict):
        raise ConfigError(f"Config key '{key}' must be a mapping")
    return sec


def _float(sec: Mapping[str, Any], key: str, default: float) -> float:
    v = sec.get(key, default)
    if isinstance(v, bool) or not isinstance(v, (int, float)):
        raise ConfigError(f"Config value '{key}' must be a number; got {v!r}")
    return float(v)


def _bool(sec: Mapping[str, Any], key: str, default: bool) -> bool:
    v = sec.get(key, default)
    if not isinstance(v, bool):
        raise ConfigError(f"Config value '{key}' must be true or false; got {v!r}")
    return v


def load_config(path: str | Path, overrides: Mapping[str, Any] | None = None) -> ScorerConfig:
    p = Path(path)
    raw = load_yaml(p)
    if overrides:
        raw = deep_update(raw, overrides)

    lm = _section(raw, "lm")
    alphabet = _section(raw, "alphabet")
    weights = _section(raw, "weights")
    dictionary = _section(raw, "dictionary")
    tokens = _section(raw, "tokens")

    if "path" not in lm:
        raise ConfigError("Config must define 'lm.path'")
    if "path" not in alphabet:
        raise ConfigError("Config must define 'alphabet.path'")

    # Relative paths are resolved against the config file's directory.
    def _resolve(v: Any) -> Path:
        q = Path(str(v))
        return q if q.is_absolute() else p.parent / q

    defaults = ReservedTokens()
    reserved = ReservedTokens(
        unk=str(tokens.get("unk", defaults.unk)),
        bos=str(tokens.get("bos", defaults.bos)),
        eos=str(tokens.get("eos", defaults.eos)),
        oov_score=_float(tokens, "oov_score", defaults.oov_score),
    )

    return ScorerConfig(
        lm_path=_resolve(lm["path"]),
        alphabet_path=_resolve(alphabet["path"]),
        vocab_path=_resolve(lm["vocab_path"]) if lm.get("vocab_path") else None,
        alpha=_float(weights, "alpha", 0.5),
        beta=_float(weights, "beta", 1.0),
        add_space=_bool(dictionary, "add_space", False),
        reserved=reserved,
        log_level=str(raw.get("log_level", "INFO")),
    )
