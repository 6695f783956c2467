from __future__ import annotations

from typing import Any, Mapping

from flask import request

from ..core.exceptions import (
    AuthenticationError,
    ConflictError,
    DomainError,
    NotFoundError,
    ValidationError,
)

_STATUS_BY_ERROR = (
    (ValidationError, 400),
    (AuthenticationError, 401),
    (NotFoundError, 404),
    (ConflictError, 409),
)


def status_for(error: DomainError) -> int:
    for cls, status in _STATUS_BY_ERROR:
        if isinstance(error, cls):
            return status
    return 400


def request_payload() -> Mapping[str, Any]:
    """JSON body when sent as JSON, else the urlencoded form."""
    data = request.get_json(silent=True)
    if isinstance(data, dict):
        return data
    return request.form
