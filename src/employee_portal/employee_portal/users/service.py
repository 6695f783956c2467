from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any, Mapping

from werkzeug.security import check_password_hash, generate_password_hash

from ..common.validators import require_fields
from ..core.exceptions import AuthenticationError, ConflictError, NotFoundError, ValidationError
from .model import User
from .repository import UserRepository

logger = logging.getLogger(__name__)

REGISTER_FIELDS = ("fullName", "email", "employeeId", "phoneNumber", "password", "confirmPassword")
LOGIN_FIELDS = ("email", "password")
UPDATE_FIELDS = ("originalEmail", "fullName", "email", "employeeId", "phoneNumber")


@dataclass(frozen=True)
class LoginResult:
    """What the login endpoint sends back to the browser."""

    user: User

    @property
    def message(self) -> str:
        return f"Login successful! Welcome, {self.user.full_name}"

    def to_dict(self) -> dict[str, Any]:
        return {"message": self.message, "user": self.user.to_public_dict(include_id=True)}


class AuthService:
    """Use cases: register a new employee, log in."""

    def __init__(self, users: UserRepository):
        self._users = users

    def register(self, payload: Mapping[str, Any]) -> int:
        data = require_fields(payload, REGISTER_FIELDS, "All fields are required.")
        if data["password"] != data["confirmPassword"]:
            raise ValidationError("Passwords do not match.")

        if self._users.exists_email_or_employee_id(email=data["email"], employee_id=data["employeeId"]):
            raise ConflictError("Email or Employee ID already registered.")

        user_id = self._users.create(
            full_name=data["fullName"],
            email=data["email"],
            employee_id=data["employeeId"],
            phone_number=data["phoneNumber"],
            password_hash=generate_password_hash(data["password"]),
        )
        logger.info("Registered employee %s (user_id=%s)", data["employeeId"], user_id)
        return user_id

    def login(self, payload: Mapping[str, Any]) -> LoginResult:
        data = require_fields(payload, LOGIN_FIELDS, "Email and password are required.")

        user = self._users.get_by_email(data["email"])
        if not user:
            raise AuthenticationError("Invalid email or password.")

        try:
            ok = check_password_hash(user.password_hash, data["password"])
        except ValueError:
            # stored hash in a format werkzeug cannot parse
            ok = False

        if not ok:
            raise AuthenticationError("Invalid email or password.")

        return LoginResult(user=user)


class ProfileService:
    """Use cases: read and edit an employee's own profile."""

    def __init__(self, users: UserRepository):
        self._users = users

    def get_profile(self, email: str) -> dict[str, Any]:
        user = self._users.get_by_email(email)
        if not user:
            raise NotFoundError("User profile not found.")
        return user.to_public_dict()

    def update_profile(self, payload: Mapping[str, Any]) -> None:
        data = require_fields(payload, UPDATE_FIELDS, "All fields are required for update.")

        if self._users.exists_for_other_user(
            email=data["email"],
            employee_id=data["employeeId"],
            original_email=data["originalEmail"],
        ):
            raise ConflictError("New Email or Employee ID is already in use by another account.")

        updated = self._users.update_by_email(
            original_email=data["originalEmail"],
            full_name=data["fullName"],
            email=data["email"],
            employee_id=data["employeeId"],
            phone_number=data["phoneNumber"],
        )
        if not updated:
            raise NotFoundError("User not found or no changes made.")
        logger.info("Updated profile %s -> %s", data["originalEmail"], data["email"])
