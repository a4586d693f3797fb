"""Utilities for Alembic migration scripts."""
from __future__ import annotations

import math

from alembic.operations import Operations
from loguru import logger
from sqlalchemy import inspect

from server_helpers.utils.exceptions import DatabaseError


def drop_foreign_key(op: Operations, table_name: str, column_name: str) -> None:
    """Drop the foreign key constraint covering ``table_name.column_name``."""

    inspector = inspect(op.get_bind())
    foreign_key = next(
        (
            fk
            for fk in inspector.get_foreign_keys(table_name)
            if column_name in fk.get("constrained_columns", [])
        ),
        None,
    )
    if foreign_key is None or not foreign_key.get("name"):
        raise DatabaseError(
            f"No named foreign key found on {table_name}.{column_name}",
            details={"table": table_name, "column": column_name},
        )

    op.drop_constraint(foreign_key["name"], table_name, type_="foreignkey")


class MigrationProgress:
    """Log percentage progress for long running data migrations."""

    def __init__(self, file_name: str, total_count: int) -> None:
        self.file_name = file_name
        self.total_count = total_count
        self.progress = 0

    @property
    def percent(self) -> int:
        if not self.total_count:
            return 100
        return math.floor(self.progress / self.total_count * 100 + 0.5)

    def show(self) -> None:
        self.progress += 1
        logger.info(f"{self.file_name} Progress {self.percent} %")
