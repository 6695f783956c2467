from __future__ import annotations

from typing import Any, Mapping, Sequence

from ..core.exceptions import ValidationError


def require_fields(payload: Mapping[str, Any], fields: Sequence[str], message: str) -> dict[str, str]:
    """Pick `fields` out of a request payload, all of them non-blank.

    Raises ValidationError(message) on the first missing one.
    """
    out: dict[str, str] = {}
    for name in fields:
        value = payload.get(name)
        if value is None or not str(value).strip():
            raise ValidationError(message)
        out[name] = str(value)
    return out
