import sqlite3
from contextlib import closing

import pytest

from genco.database import DatabaseError, execute_insert, get_db_connection

INSERT = (
    "INSERT INTO java_import_route (base_package, route, last_type_id) "
    "VALUES (?1, ?2, ?3)"
)


@pytest.fixture
def db_file(tmp_path):
    return tmp_path / "database" / "test.db"


def test_setup_creates_database_and_table(db_file):
    with closing(get_db_connection(db_file)) as connection:
        tables = [
            row[0]
            for row in connection.execute(
                "SELECT name FROM sqlite_master WHERE type = 'table'"
            )
        ]

    assert db_file.is_file()
    assert "java_import_route" in tables


def test_connection_twice_keeps_schema(db_file):
    get_db_connection(db_file).close()
    with closing(get_db_connection(db_file)) as connection:
        columns = [row[1] for row in connection.execute("PRAGMA table_info(java_import_route)")]

    assert columns == ["id", "base_package", "route", "last_type_id"]


def test_execute_insert_returns_changed_rows(db_file):
    changed = execute_insert(INSERT, ("/base", "org.test.Example", "Example"), db_file)

    assert changed == 1
    with closing(get_db_connection(db_file)) as connection:
        rows = connection.execute(
            "SELECT base_package, route, last_type_id FROM java_import_route"
        ).fetchall()
    assert rows == [("/base", "org.test.Example", "Example")]


def test_execute_insert_invalid_query_raises_and_warns(db_file, capsys):
    with pytest.raises(DatabaseError) as info:
        execute_insert("INSERT INTO missing_table VALUES (?1)", ("value",), db_file)

    assert str(info.value).startswith("Error running execute query: ")
    assert capsys.readouterr().out.startswith("WARN: Error running execute query: ")


def test_failed_insert_leaves_no_rows(db_file):
    with pytest.raises(DatabaseError):
        execute_insert(INSERT, ("/base", "org.test.Example"), db_file)

    with closing(get_db_connection(db_file)) as connection:
        count = connection.execute("SELECT COUNT(*) FROM java_import_route").fetchone()[0]
    assert count == 0


def test_connection_is_sqlite(db_file):
    with closing(get_db_connection(db_file)) as connection:
        assert connection.execute("SELECT 1").fetchone() == (1,)
        assert isinstance(connection, sqlite3.Connection)