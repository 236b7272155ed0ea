from __future__ import annotations

import argparse
import logging

from .game import main as run_game


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(prog="gridsnake", description="Play snake on an 11x11 grid.")
    parser.add_argument("--seed", type=int, default=None, help="Seed for food placement.")
    parser.add_argument(
        "--log-level",
        default="WARNING",
        choices=("DEBUG", "INFO", "WARNING", "ERROR"),
        help="Logging verbosity.",
    )
    ns = parser.parse_args(argv)

    logging.basicConfig(level=ns.log_level, format="%(asctime)s %(name)s %(levelname)s %(message)s")
    run_game(seed=ns.seed)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
