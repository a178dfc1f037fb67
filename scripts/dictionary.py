from __future__ import annotations

import argparse
import logging
import sys

from lmscorer.config import ConfigError, load_config
from lmscorer.fst.acceptor import is_deterministic, num_arcs
from lmscorer.utils.io import write_json
from lmscorer.utils.logging_setup import setup_logging

logger = logging.getLogger("lmscorer.scripts.dictionary")


def main() -> None:
    ap = argparse.ArgumentParser(description="Compile the LM vocabulary into a decoding dictionary.")
    ap.add_argument("--config", required=True)
    ap.add_argument(
        "--add-space",
        action=argparse.BooleanOptionalAction,
        default=None,
        help="end every word with the space symbol (default: dictionary.add_space from the config)",
    )
    ap.add_argument("--out", default="artifacts/dictionary.json")
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

    add_space = cfg.add_space if args.add_space is None else args.add_space
    accepted = scorer.fill_dictionary(add_space, show_progress=True)
    dictionary = scorer.dictionary

    write_json(
        args.out,
        {
            "lm": str(cfg.lm_path),
            "vocab_size": scorer.dict_size,
            "accepted_words": accepted,
            "add_space": add_space,
            "num_states": dictionary.num_states(),
            "num_arcs": num_arcs(dictionary),
            "deterministic": is_deterministic(dictionary),
        },
    )


if __name__ == "__main__":
    main()
