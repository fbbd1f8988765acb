"""Stored locations of Java types, keyed by their simple type name."""

from __future__ import annotations

import os
from contextlib import closing
from dataclasses import dataclass
from pathlib import Path
from typing import Iterable

from genco.database import execute_insert, get_db_connection
from genco.path_helper import try_to_absolute_path

_MAIN_JAVA = "/src/main/java/"
_JAVA_EXTENSION = ".java"


@dataclass(frozen=True)
class JavaImportRouteEntity:
    """A stored import route of a Java type."""

    id: int
    base_package: str
    route: str
    last_type_id: str

    def to_file_path(self) -> Path:
        """The source file of the type inside its project."""
        route_path = self.route.replace(".", "/")
        return Path(f"{self.base_package}{_MAIN_JAVA}{route_path}{_JAVA_EXTENSION}")


@dataclass(frozen=True)
class JavaImportRouteCreate:
    """An import route of a Java type, ready to be stored."""

    base_package: str
    route: str
    last_type_id: str


def save(
    java_files: Iterable[JavaImportRouteCreate],
    db_file: str | os.PathLike | None = None,
) -> None:
    """Store every route in ``java_files``."""
    for entity in java_files:
        execute_insert(
            "INSERT INTO java_import_route (base_package, route, last_type_id) "
            "VALUES (?, ?, ?)",
            (entity.base_package, entity.route, entity.last_type_id),
            db_file,
        )


def _query(
    sql: str, params: tuple, db_file: str | os.PathLike | None
) -> list[JavaImportRouteEntity]:
    with closing(get_db_connection(db_file)) as connection:
        rows = connection.execute(sql, params).fetchall()
    return [JavaImportRouteEntity(*row) for row in rows]


def by_last_type_id(
    type_id: str, db_file: str | os.PathLike | None = None
) -> list[JavaImportRouteEntity]:
    """Return the stored routes whose type name is ``type_id``."""
    return _query(
        "SELECT id, base_package, route, last_type_id FROM java_import_route "
        "WHERE last_type_id = ?",
        (type_id,),
        db_file,
    )


def by_base_package_and_route(
    base_package: str | os.PathLike,
    import_route: str,
    db_file: str | os.PathLike | None = None,
) -> list[JavaImportRouteEntity]:
    """Return the stored routes of ``import_route`` inside ``base_package``."""
    return _query(
        "SELECT id, base_package, route, last_type_id FROM java_import_route "
        "WHERE base_package = ? AND route = ?",
        (try_to_absolute_path(base_package), import_route),
        db_file,
    )


def get_import_route(base_package_path: str, file_path: str) -> str | None:
    """Derive the dotted import route of a Java file inside its project.

    ``/p`` and ``/p/src/main/java/org/test/A.java`` give ``org.test.A``.
    """
    file_bytes = file_path.encode("utf-8")
    start = len(base_package_path.encode("utf-8")) + len(_MAIN_JAVA.encode("utf-8"))
    end = len(file_bytes) - len(_JAVA_EXTENSION.encode("utf-8"))
    if start >= end:
        return None
    return file_bytes[start:end].decode("utf-8").replace("/", ".")