from __future__ import annotations

from unittest.mock import MagicMock

import pytest
from mysql.connector import errors as mysql_errors

from src.employee_portal.employee_portal.core.exceptions import ConflictError
from src.employee_portal.employee_portal.users.mysql_user_repository import MySQLUserRepository

ROW = {
    "user_id": 7,
    "full_name": "Asha Rao",
    "email": "asha@example.com",
    "employee_id": "EMP001",
    "phone_number": "9876543210",
    "password_hash": "pbkdf2:sha256:1$salt$hash",
}


@pytest.fixture
def conn_factory():
    return MagicMock()


@pytest.fixture
def cursor(conn_factory):
    return conn_factory.connect.return_value.cursor.return_value


def test_get_by_email_maps_row(conn_factory, cursor):
    cursor.fetchone.return_value = ROW

    user = MySQLUserRepository(conn_factory).get_by_email("asha@example.com")

    assert user.user_id == 7
    assert user.employee_id == "EMP001"
    assert cursor.execute.call_args.args[1] == ("asha@example.com",)
    conn_factory.connect.return_value.commit.assert_called_once()
    conn_factory.connect.return_value.close.assert_called_once()


def test_get_by_email_missing(conn_factory, cursor):
    cursor.fetchone.return_value = None

    assert MySQLUserRepository(conn_factory).get_by_email("ghost@example.com") is None


def test_create_returns_lastrowid(conn_factory, cursor):
    cursor.lastrowid = 12

    user_id = MySQLUserRepository(conn_factory).create(
        full_name="Ravi",
        email="ravi@example.com",
        employee_id="EMP002",
        phone_number="9",
        password_hash="h",
    )

    assert user_id == 12


def test_create_duplicate_becomes_conflict(conn_factory, cursor):
    cursor.execute.side_effect = mysql_errors.IntegrityError(msg="Duplicate entry", errno=1062)

    with pytest.raises(ConflictError):
        MySQLUserRepository(conn_factory).create(
            full_name="Ravi",
            email="ravi@example.com",
            employee_id="EMP002",
            phone_number="9",
            password_hash="h",
        )
    conn_factory.connect.return_value.rollback.assert_called_once()


def test_exists_checks(conn_factory, cursor):
    repo = MySQLUserRepository(conn_factory)

    cursor.fetchone.return_value = {"n": 1}
    assert repo.exists_email_or_employee_id(email="a@example.com", employee_id="E1")

    cursor.fetchone.return_value = {"n": 0}
    assert not repo.exists_for_other_user(email="a@example.com", employee_id="E1", original_email="a@example.com")
    assert cursor.execute.call_args.args[1] == ("a@example.com", "E1", "a@example.com")


def test_update_by_email_unknown_user(conn_factory, cursor):
    cursor.fetchone.return_value = None

    updated = MySQLUserRepository(conn_factory).update_by_email(
        original_email="ghost@example.com",
        full_name="Ghost",
        email="ghost@example.com",
        employee_id="E404",
        phone_number="0",
    )

    assert updated is False
    assert cursor.execute.call_count == 1


def test_update_by_email_matches_by_id(conn_factory, cursor):
    cursor.fetchone.return_value = {"user_id": 7}

    updated = MySQLUserRepository(conn_factory).update_by_email(
        original_email="asha@example.com",
        full_name="Asha R.",
        email="asha.r@example.com",
        employee_id="EMP001",
        phone_number="1",
    )

    assert updated is True
    assert cursor.execute.call_args.args[1] == ("Asha R.", "asha.r@example.com", "EMP001", "1", 7)
