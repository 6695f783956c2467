from __future__ import annotations

from dataclasses import dataclass, field
from datetime import date
from typing import Callable, Mapping, Optional

from .calendar.holidays import HOLIDAY_TABLE, HolidayKey
from .common.datetime_utils import today_local
from .database.connection import DBConfig, DatabaseConnection
from .users.mysql_user_repository import MySQLUserRepository
from .users.repository import UserRepository
from .users.service import AuthService, ProfileService


@dataclass(frozen=True)
class Container:
    users_repo: UserRepository

    auth_service: AuthService
    profile_service: ProfileService

    conn: Optional[DatabaseConnection] = None
    clock: Callable[[], date] = today_local
    holidays: Mapping[HolidayKey, str] = field(default_factory=lambda: HOLIDAY_TABLE)


def build_container(
    *,
    db_config: Optional[Mapping] = None,
    users_repo: Optional[UserRepository] = None,
    clock: Callable[[], date] = today_local,
) -> Container:
    """Wire repositories and services.

    Pass `users_repo` to run without MySQL (tests); otherwise `db_config` is required.
    """
    conn: Optional[DatabaseConnection] = None
    if users_repo is None:
        if db_config is None:
            raise ValueError("db_config is required when no users_repo is given")
        conn = DatabaseConnection.get_instance(DBConfig.from_mapping(db_config))
        users_repo = MySQLUserRepository(conn)

    return Container(
        users_repo=users_repo,
        auth_service=AuthService(users_repo),
        profile_service=ProfileService(users_repo),
        conn=conn,
        clock=clock,
    )
