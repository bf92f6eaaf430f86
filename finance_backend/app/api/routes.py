"""HTTP routes for the Flask API."""

import logging
from http import HTTPStatus
from typing import Any, Dict

from flask import Blueprint, current_app, jsonify, request
from pydantic import ValidationError

from finance_backend.core.accumulation import project_compound_interest
from finance_backend.core.errors import CalculationError, DegenerateGoal
from finance_backend.core.reserve import size_emergency_reserve
from finance_backend.schemas.accumulation import CompoundInterestRequest
from finance_backend.schemas.ping import PingResponse
from finance_backend.schemas.reserve import EmergencyReserveRequest

api_bp = Blueprint("api", __name__)
logger = logging.getLogger(__name__)


@api_bp.errorhandler(ValidationError)
def _handle_validation_error(exc: ValidationError):
    """Convert Pydantic validation errors into JSON responses."""
    return jsonify({"detail": exc.errors(include_url=False)}), HTTPStatus.UNPROCESSABLE_ENTITY


@api_bp.errorhandler(CalculationError)
def _handle_calculation_error(exc: CalculationError):
    """Report rejected inputs and unreachable goals with their reason code."""
    status = (
        HTTPStatus.UNPROCESSABLE_ENTITY
        if isinstance(exc, DegenerateGoal)
        else HTTPStatus.BAD_REQUEST
    )
    return jsonify({"error": exc.errors, "reason": exc.reason}), status


@api_bp.get("/ping")
def ping() -> Any:
    """Health-check endpoint."""
    settings = current_app.config["SETTINGS"]
    response = PingResponse(message="pong", service=settings.PROJECT_NAME)
    return jsonify(response.model_dump())


@api_bp.post("/calc/compound-interest")
def compound_interest() -> Any:
    """Month-by-month compound-interest projection with yearly samples."""
    raw_payload: Dict[str, Any] = request.get_json(force=True, silent=False)
    payload = CompoundInterestRequest.model_validate(raw_payload)
    result = project_compound_interest(payload.to_projection_input())
    return jsonify(result.model_dump(mode="json"))


@api_bp.post("/calc/emergency-reserve")
def emergency_reserve() -> Any:
    """Target reserve and the months needed to build it."""
    raw_payload: Dict[str, Any] = request.get_json(force=True, silent=False)
    payload = EmergencyReserveRequest.model_validate(raw_payload)
    logger.debug("Reserve request for %s", payload.employment_type.value)
    result = size_emergency_reserve(payload.to_reserve_input())
    return jsonify(result.model_dump(mode="json"))
