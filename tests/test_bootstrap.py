from __future__ import annotations

from pathlib import Path
from unittest.mock import MagicMock

from src.employee_portal.employee_portal.database.bootstrap import apply_schema, iter_sql_statements

SCHEMA_PATH = Path(__file__).resolve().parents[1] / "database" / "schema.sql"


def test_split_respects_quotes_and_comments():
    sql = "INSERT INTO t VALUES('a;b'); -- trailing; note\nSELECT \"x;y\";\n\n"

    assert list(iter_sql_statements(sql)) == ["INSERT INTO t VALUES('a;b')", 'SELECT "x;y"']


def test_apply_schema_skips_create_database_and_use():
    conn_factory = MagicMock()
    conn_factory.config.database = "employee_portal_test"
    cursor = conn_factory.connect.return_value.cursor.return_value

    executed = apply_schema(conn_factory, schema_path=SCHEMA_PATH)

    statements = [c.args[0] for c in cursor.execute.call_args_list]
    assert executed == 1
    assert "CREATE DATABASE IF NOT EXISTS `employee_portal_test`" in statements[0]
    assert statements[1].startswith("CREATE TABLE IF NOT EXISTS users")
    assert len(statements) == 2


def test_double_dash_without_space_is_not_a_comment():
    sql = "SELECT 1--1;\nSELECT 2 -- real comment\n;--\n"

    assert list(iter_sql_statements(sql)) == ["SELECT 1--1", "SELECT 2"]
