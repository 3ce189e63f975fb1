"""Command-line interface.

Reads ``config.json`` (or ``--config``), asks for any missing file names,
prints the effective configuration, runs the batch and reports where the
results went.
"""

from __future__ import annotations

import argparse
import logging
import sys
from typing import Callable, List, Optional

from accrual.config import DEFAULT_CONFIG_PATH, RuntimeConfig, config_from_mapping, load_config
from accrual.core.periods import PERIOD_STRATEGIES
from accrual.core.pipeline import run
from accrual.errors import AccrualError

logger = logging.getLogger(__name__)

Prompt = Callable[[str], str]


def _fill_missing_paths(config: RuntimeConfig, prompt: Prompt) -> RuntimeConfig:
    updates = {}
    if not config.input_path:
        updates["input_path"] = prompt("Input file name: ").strip() or None
    if not config.output_path:
        updates["output_path"] = prompt("Output file name: ").strip() or None
    return config.model_copy(update=updates) if updates else config


def build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(
        prog="interest-accrual",
        description="Project monthly compound interest for a ledger of dated amounts up to today.",
    )
    p.add_argument("--config", default=DEFAULT_CONFIG_PATH, help="JSON config file (default: %(default)s)")
    p.add_argument("--input", dest="input_path", help="Ledger file (.csv or .xlsx); overrides the config")
    p.add_argument("--output", dest="output_path", help="Results file (.csv or .xlsx); overrides the config")
    p.add_argument("--rate", type=float, help="Annual interest rate in percent; overrides the config")
    p.add_argument(
        "--period-strategy",
        choices=sorted(PERIOD_STRATEGIES),
        help="How to step from one period end to the next; overrides the config",
    )
    p.add_argument("--overwrite", action="store_true", help="Overwrite an existing results file")
    p.add_argument("-v", "--verbose", action="store_true", help="Enable verbose logging")
    return p


def main(argv: Optional[List[str]] = None, prompt: Prompt = input) -> int:
    args = build_parser().parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(asctime)s - %(levelname)s - %(message)s",
    )

    try:
        config = load_config(args.config)
        overrides = {
            "input_path": args.input_path,
            "output_path": args.output_path,
            "annual_rate_percent": args.rate,
            "period_strategy": args.period_strategy,
        }
        updates = {key: value for key, value in overrides.items() if value is not None}
        if args.overwrite:
            updates["overwrite_existing"] = True
        if updates:
            config = config_from_mapping({**config.model_dump(), **updates})

        config = _fill_missing_paths(config, prompt)
        print(config.describe())
        print()

        written = run(config)
    except AccrualError as ex:
        logger.debug("run failed", exc_info=True)
        sys.stderr.write(f"error: {ex}\n")
        return 2

    print(f"Results saved to: {written}")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
