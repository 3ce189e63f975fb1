"""Read a ledger, accrue interest, write the results."""

from __future__ import annotations

import logging
from datetime import datetime
from pathlib import Path
from typing import Optional

from accrual.config import RuntimeConfig
from accrual.core.engine import accrue
from accrual.core.output_path import resolve_output_path
from accrual.core.parser import parse_rows
from accrual.core.periods import get_period_advance
from accrual.errors import ConfigError
from accrual.formats import get_format

logger = logging.getLogger(__name__)


def run(config: RuntimeConfig, now: Optional[datetime] = None) -> Path:
    """Run one accrual batch and return the path actually written.

    Every row is parsed before anything is written, so a bad row leaves no
    output file behind.

    Raises:
        ConfigError, UnsupportedFormatError, InvalidRowError
    """
    if not config.input_path:
        raise ConfigError("no input file given")
    if not config.output_path:
        raise ConfigError("no output file given")

    reader = get_format(config.input_path)
    writer = get_format(config.output_path)
    advance = get_period_advance(config.period_strategy)

    raw_rows = reader.read_rows(config.input_path)
    logger.info("read %d rows from %s (%s)", len(raw_rows), config.input_path, reader.name)

    entries = parse_rows(raw_rows)
    points = accrue(entries, config.annual_rate, now=now, advance=advance)
    logger.info(
        "accrued %d periods for %d entries at %s%% (%s)",
        len(points),
        len(entries),
        config.annual_rate_percent,
        config.period_strategy,
    )

    target = resolve_output_path(config.output_path, config.overwrite_existing, now=now)
    writer.write_rows(target, points)
    logger.info("wrote %s (%s)", target, writer.name)
    return target
