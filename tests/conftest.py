from __future__ import annotations

from datetime import date
from typing import Optional

import pytest
from werkzeug.security import generate_password_hash

from src.employee_portal.employee_portal.container import build_container
from src.employee_portal.employee_portal.core.exceptions import ConflictError
from src.employee_portal.employee_portal.main import create_app
from src.employee_portal.employee_portal.users.model import User


class InMemoryUsers:
    def __init__(self):
        self._by_id: dict[int, User] = {}
        self._next_id = 1

    def add(self, *, full_name: str, email: str, employee_id: str, phone_number: str, password: str) -> User:
        user_id = self.create(
            full_name=full_name,
            email=email,
            employee_id=employee_id,
            phone_number=phone_number,
            password_hash=generate_password_hash(password),
        )
        return self._by_id[user_id]

    def create(self, *, full_name, email, employee_id, phone_number, password_hash) -> int:
        if self.exists_email_or_employee_id(email=email, employee_id=employee_id):
            raise ConflictError("Email or Employee ID already registered.")
        user_id = self._next_id
        self._next_id += 1
        self._by_id[user_id] = User(
            user_id=user_id,
            full_name=full_name,
            email=email,
            employee_id=employee_id,
            phone_number=phone_number,
            password_hash=password_hash,
        )
        return user_id

    def get_by_email(self, email: str) -> Optional[User]:
        return next((u for u in self._by_id.values() if u.email == email), None)

    def exists_email_or_employee_id(self, *, email: str, employee_id: str) -> bool:
        return any(u.email == email or u.employee_id == employee_id for u in self._by_id.values())

    def exists_for_other_user(self, *, email: str, employee_id: str, original_email: str) -> bool:
        return any(
            (u.email == email or u.employee_id == employee_id) and u.email != original_email
            for u in self._by_id.values()
        )

    def update_by_email(self, *, original_email, full_name, email, employee_id, phone_number) -> bool:
        user = self.get_by_email(original_email)
        if not user:
            return False
        self._by_id[user.user_id] = User(
            user_id=user.user_id,
            full_name=full_name,
            email=email,
            employee_id=employee_id,
            phone_number=phone_number,
            password_hash=user.password_hash,
        )
        return True


@pytest.fixture
def fixed_today() -> date:
    return date(2024, 3, 15)


@pytest.fixture
def users_repo() -> InMemoryUsers:
    return InMemoryUsers()


@pytest.fixture
def asha(users_repo) -> User:
    return users_repo.add(
        full_name="Asha Rao",
        email="asha@example.com",
        employee_id="EMP001",
        phone_number="9876543210",
        password="s3cret",
    )


@pytest.fixture
def app(users_repo, fixed_today):
    container = build_container(users_repo=users_repo, clock=lambda: fixed_today)
    return create_app("config.testing", container=container)


@pytest.fixture
def client(app):
    return app.test_client()
