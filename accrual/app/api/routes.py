"""HTTP routes for the Flask API."""

from http import HTTPStatus
from typing import Any, Dict

from flask import Blueprint, jsonify, request
from pydantic import ValidationError

from accrual import __version__
from accrual.core.engine import accrue
from accrual.core.parser import parse_rows
from accrual.core.periods import get_period_advance
from accrual.errors import InvalidRowError
from accrual.schemas.api import AccrualRequest, AccrualResponse, PingResponse

api_bp = Blueprint("api", __name__)


@api_bp.errorhandler(ValidationError)
def _handle_validation_error(exc: ValidationError):
    """Convert Pydantic validation errors into JSON responses."""
    return jsonify({"detail": exc.errors(include_url=False)}), HTTPStatus.UNPROCESSABLE_ENTITY


@api_bp.errorhandler(InvalidRowError)
def _handle_invalid_row(exc: InvalidRowError):
    detail = {"row": exc.row_number, "field": exc.field, "value": exc.value, "msg": exc.reason}
    return jsonify({"detail": [detail]}), HTTPStatus.UNPROCESSABLE_ENTITY


@api_bp.get("/ping")
def ping() -> Any:
    """Health-check endpoint."""
    return jsonify(PingResponse(message="pong", version=__version__).model_dump())


@api_bp.post("/calc/accrual")
def accrual() -> Any:
    """Accrue interest for the posted ledger rows."""
    raw_payload: Dict[str, Any] = request.get_json(force=True, silent=False)
    payload = AccrualRequest.model_validate(raw_payload)

    entries = parse_rows(row.to_raw_row() for row in payload.rows)
    points = accrue(
        entries,
        payload.annual_rate_percent / 100,
        now=payload.as_of,
        advance=get_period_advance(payload.period_strategy),
    )
    response = AccrualResponse(points=points, count=len(points))
    return jsonify(response.model_dump())
