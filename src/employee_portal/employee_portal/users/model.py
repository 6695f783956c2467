from __future__ import annotations

from dataclasses import dataclass
from typing import Any


@dataclass(frozen=True)
class User:
    """Domain entity: a registered employee.

    Plain data object; no DB access lives here.
    """

    user_id: int
    full_name: str
    email: str
    employee_id: str
    phone_number: str
    password_hash: str

    def to_public_dict(self, *, include_id: bool = False) -> dict[str, Any]:
        """camelCase view sent to the browser (never includes the hash)."""
        out: dict[str, Any] = {}
        if include_id:
            out["id"] = self.user_id
        out.update(
            {
                "fullName": self.full_name,
                "email": self.email,
                "employeeId": self.employee_id,
                "phoneNumber": self.phone_number,
            }
        )
        return out
