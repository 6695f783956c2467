from __future__ import annotations

import logging
from typing import Any, Mapping, Optional

from mysql.connector import errors as mysql_errors

from ..core.exceptions import ConflictError
from ..database.connection import DatabaseConnection
from ..database.mysql_base import db_cursor, fetchone
from .model import User
from .repository import UserRepository

logger = logging.getLogger(__name__)

_USER_COLUMNS = "user_id, full_name, email, employee_id, phone_number, password_hash"


def _row_to_user(row: Mapping[str, Any]) -> User:
    return User(
        user_id=int(row["user_id"]),
        full_name=row["full_name"],
        email=row["email"],
        employee_id=row["employee_id"],
        phone_number=row["phone_number"],
        password_hash=row["password_hash"],
    )


class MySQLUserRepository(UserRepository):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def create(
        self,
        *,
        full_name: str,
        email: str,
        employee_id: str,
        phone_number: str,
        password_hash: str,
    ) -> int:
        try:
            with db_cursor(self._conn_factory) as (_, cur):
                cur.execute(
                    """
                    INSERT INTO users(full_name, email, employee_id, phone_number, password_hash)
                    VALUES(%s,%s,%s,%s,%s)
                    """,
                    (full_name, email, employee_id, phone_number, password_hash),
                )
                return int(cur.lastrowid)
        except mysql_errors.IntegrityError as e:
            logger.info("Duplicate registration rejected for %s: %s", email, e)
            raise ConflictError("Email or Employee ID already registered.") from e

    def get_by_email(self, email: str) -> Optional[User]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(f"SELECT {_USER_COLUMNS} FROM users WHERE email=%s", (email,))
            row = fetchone(cur)
            return _row_to_user(row) if row else None

    def exists_email_or_employee_id(self, *, email: str, employee_id: str) -> bool:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                "SELECT COUNT(*) AS n FROM users WHERE email=%s OR employee_id=%s",
                (email, employee_id),
            )
            row = fetchone(cur)
            return bool(row and int(row["n"]) > 0)

    def exists_for_other_user(self, *, email: str, employee_id: str, original_email: str) -> bool:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                SELECT COUNT(*) AS n FROM users
                WHERE (email=%s OR employee_id=%s) AND email<>%s
                """,
                (email, employee_id, original_email),
            )
            row = fetchone(cur)
            return bool(row and int(row["n"]) > 0)

    def update_by_email(
        self,
        *,
        original_email: str,
        full_name: str,
        email: str,
        employee_id: str,
        phone_number: str,
    ) -> bool:
        try:
            with db_cursor(self._conn_factory) as (_, cur):
                cur.execute("SELECT user_id FROM users WHERE email=%s", (original_email,))
                row = fetchone(cur)
                if not row:
                    return False
                # rowcount is 0 for an unchanged row on MySQL, so match by id first.
                cur.execute(
                    """
                    UPDATE users
                    SET full_name=%s, email=%s, employee_id=%s, phone_number=%s
                    WHERE user_id=%s
                    """,
                    (full_name, email, employee_id, phone_number, int(row["user_id"])),
                )
                return True
        except mysql_errors.IntegrityError as e:
            raise ConflictError("New Email or Employee ID is already in use by another account.") from e
