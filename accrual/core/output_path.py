"""Output naming that avoids clobbering an existing results file."""

from __future__ import annotations

from datetime import datetime
from pathlib import Path
from typing import Optional, Union

TIMESTAMP_FORMAT = "%Y-%m-%d %H-%M-%S"


def resolve_output_path(
    path: Union[str, Path],
    overwrite: bool,
    now: Optional[datetime] = None,
) -> Path:
    """Return ``path``, or a timestamped sibling if it exists and overwrite is off.

    ``results.csv`` becomes ``results2024-05-01 10-15-30.csv``.
    """
    target = Path(path)
    if overwrite or not target.exists():
        return target
    stamp = (now or datetime.now()).strftime(TIMESTAMP_FORMAT)
    return target.with_name(f"{target.stem}{stamp}{target.suffix}")
