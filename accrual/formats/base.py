"""Format registry: file extension -> reader/writer pair."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Callable, Dict, List, Sequence, Tuple, Union

from accrual.errors import UnsupportedFormatError
from accrual.schemas.ledger import AccrualPoint, RawRow

PathLike = Union[str, Path]
RowReader = Callable[[PathLike], List[RawRow]]
RowWriter = Callable[[PathLike, Sequence[AccrualPoint]], None]

OUTPUT_HEADER = ("Description", "Date", "Amount")


@dataclass(frozen=True)
class TabularFormat:
    name: str
    extensions: Tuple[str, ...]
    read_rows: RowReader
    write_rows: RowWriter


_REGISTRY: Dict[str, TabularFormat] = {}


def register_format(fmt: TabularFormat) -> TabularFormat:
    for ext in fmt.extensions:
        _REGISTRY[ext.lower()] = fmt
    return fmt


def supported_extensions() -> List[str]:
    return sorted(_REGISTRY)


def get_format(path: PathLike) -> TabularFormat:
    """Look up the format for ``path`` by its extension (case-insensitive).

    Raises:
        UnsupportedFormatError: if no format handles the extension.
    """
    ext = Path(path).suffix.lower()
    try:
        return _REGISTRY[ext]
    except KeyError:
        raise UnsupportedFormatError(str(path), supported_extensions()) from None
