"""Runtime configuration: loaded once, then passed explicitly to the pipeline."""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any, Dict, Optional, Union

from pydantic import BaseModel, ConfigDict, Field, ValidationError

from accrual.errors import ConfigError
from accrual.schemas.ledger import PeriodStrategyName

logger = logging.getLogger(__name__)

DEFAULT_CONFIG_PATH = "config.json"


class RuntimeConfig(BaseModel):
    """Settings for one accrual run.

    JSON keys follow the config file layout (``annualInterestRate``,
    ``inputFile``, ``outputFile``, ``overwriteExistingFile``,
    ``periodStrategy``); keyword construction uses the field names.
    """

    model_config = ConfigDict(extra="ignore", populate_by_name=True)

    annual_rate_percent: float = Field(..., alias="annualInterestRate")
    input_path: Optional[str] = Field(None, alias="inputFile")
    output_path: Optional[str] = Field(None, alias="outputFile")
    overwrite_existing: bool = Field(False, alias="overwriteExistingFile")
    period_strategy: PeriodStrategyName = Field("calendar-month", alias="periodStrategy")

    @property
    def annual_rate(self) -> float:
        """Rate as a decimal fraction."""
        return self.annual_rate_percent / 100

    def describe(self) -> str:
        return "\n".join(
            [
                "CONFIG:",
                f"- annualInterestRate: {self.annual_rate_percent}",
                f"- inputFile: {self.input_path or ''}",
                f"- outputFile: {self.output_path or ''}",
                f"- overwriteExistingFile: {self.overwrite_existing}",
                f"- periodStrategy: {self.period_strategy}",
            ]
        )


def _match_keys(raw: Dict[str, Any]) -> Dict[str, Any]:
    """Map keys onto the known aliases ignoring case."""
    aliases = {
        field.alias.lower(): field.alias
        for field in RuntimeConfig.model_fields.values()
        if field.alias
    }
    return {aliases.get(key.lower(), key): value for key, value in raw.items()}


def config_from_mapping(raw: Dict[str, Any]) -> RuntimeConfig:
    try:
        return RuntimeConfig.model_validate(_match_keys(raw))
    except ValidationError as exc:
        raise ConfigError(f"invalid configuration: {exc}") from exc


def load_config(path: Union[str, Path] = DEFAULT_CONFIG_PATH) -> RuntimeConfig:
    """Read a JSON config file.

    Raises:
        ConfigError: if the file is missing, not JSON, or has invalid values.
    """
    config_path = Path(path)
    try:
        raw = json.loads(config_path.read_text(encoding="utf-8-sig"))
    except FileNotFoundError as exc:
        raise ConfigError(f"config file not found: {config_path}") from exc
    except json.JSONDecodeError as exc:
        raise ConfigError(f"config file {config_path} is not valid JSON: {exc}") from exc

    if not isinstance(raw, dict):
        raise ConfigError(f"config file {config_path} must contain a JSON object")

    config = config_from_mapping(raw)
    logger.debug("loaded config from %s", config_path)
    return config
