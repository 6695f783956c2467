from __future__ import annotations

from typing import Optional, Protocol

from .model import User


class UserRepository(Protocol):
    """Repository interface for User.

    Services depend on this interface, never on a concrete database.
    """

    def create(
        self,
        *,
        full_name: str,
        email: str,
        employee_id: str,
        phone_number: str,
        password_hash: str,
    ) -> int:
        """Insert a user and return its id.

        Raises ConflictError when email or employee id is already taken.
        """

        raise NotImplementedError

    def get_by_email(self, email: str) -> Optional[User]:
        raise NotImplementedError

    def exists_email_or_employee_id(self, *, email: str, employee_id: str) -> bool:
        raise NotImplementedError

    def exists_for_other_user(self, *, email: str, employee_id: str, original_email: str) -> bool:
        raise NotImplementedError

    def update_by_email(
        self,
        *,
        original_email: str,
        full_name: str,
        email: str,
        employee_id: str,
        phone_number: str,
    ) -> bool:
        """Returns True when a row matched `original_email`."""

        raise NotImplementedError
