from __future__ import annotations

import argparse
import logging
import sys

from lmscorer.config import ConfigError, load_config
from lmscorer.utils.io import read_lines, write_json
from lmscorer.utils.logging_setup import setup_logging

logger = logging.getLogger("lmscorer.scripts.score")


def main() -> None:
    ap = argparse.ArgumentParser(description="Sentence log10 probabilities under the configured n-gram LM.")
    ap.add_argument("--config", required=True)
    ap.add_argument("--input", required=True, help="UTF-8 text file, one sentence per line")
    ap.add_argument("--out", default="artifacts/scores.json")
    ap.add_argument("--alpha", type=float, default=None)
    ap.add_argument("--beta", type=float, default=None)
    args = ap.parse_args()

    cfg = load_config(args.config)
    setup_logging(cfg.log_level)
    try:
        scorer = cfg.build_scorer()
    except FileNotFoundError as e:
        logger.error("Invalid language model file: %s", e)
        sys.exit(1)
    except ConfigError as e:
        logger.error("%s", e)
        sys.exit(1)
    if args.alpha is not None or args.beta is not None:
        scorer.reset_params(
            cfg.alpha if args.alpha is None else args.alpha,
            cfg.beta if args.beta is None else args.beta,
        )

    rows = []
    for line in read_lines(args.input):
        tokens = list(line) if scorer.is_character_based else line.split()
        rows.append({"text": line, "log10_prob": scorer.sentence_log_prob(tokens)})

    write_json(
        args.out,
        {
            "lm": str(cfg.lm_path),
            "order": scorer.max_order,
            "character_based": scorer.is_character_based,
            "alpha": scorer.alpha,
            "beta": scorer.beta,
            "sentences": rows,
        },
    )
    logger.info("Scored %d sentences -> %s", len(rows), args.out)


if __name__ == "__main__":
    main()
