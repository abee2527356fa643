"""
Per-entity SQL templates.

A QueryTemplate knows an entity's table, key column, selected columns and
ordering, and composes a builder's SqlFragment into a complete statement.
Templates are frozen module-level constants; composing one never mutates it.
"""

from dataclasses import dataclass
from typing import Any

from db.sql import SqlFragment


@dataclass(frozen=True)
class QueryTemplate:
    """Fixed SELECT / UPDATE shapes for one table."""
    table: str
    key_column: str
    columns: tuple[str, ...]
    order_by: str

    @property
    def column_list(self) -> str:
        return ", ".join(self.columns)

    def select(self, where: SqlFragment) -> SqlFragment:
        """
        SELECT every template column, filtered by a WHERE fragment.

        An empty where.clause lists the whole table.
        """
        parts = [f"SELECT {self.column_list}", f"FROM {self.table}"]
        if where.clause:
            parts.append(where.clause)
        parts.append(f"ORDER BY {self.order_by}")
        return SqlFragment(" ".join(parts), where.values)

    def update(self, set_clause: SqlFragment, key: Any) -> SqlFragment:
        """
        UPDATE one row by key and return its new state.

        The key is appended after the SET values, so it takes the next
        placeholder number.

        Example:
            COMPANIES.update(SqlFragment('"name"=$1', ("New",)), "acme")
            -> UPDATE companies SET "name"=$1 WHERE handle = $2 RETURNING ...
               values ("New", "acme")
        """
        key_idx = len(set_clause.values) + 1
        sql = (
            f"UPDATE {self.table} "
            f"SET {set_clause.clause} "
            f"WHERE {self.key_column} = ${key_idx} "
            f"RETURNING {self.column_list}"
        )
        return SqlFragment(sql, (*set_clause.values, key))


COMPANIES = QueryTemplate(
    table="companies",
    key_column="handle",
    columns=("handle", "name", "description", "num_employees", "logo_url"),
    order_by="name",
)

JOBS = QueryTemplate(
    table="jobs",
    key_column="id",
    columns=("id", "title", "salary", "equity", "company_handle"),
    order_by="company_handle, title",
)

USERS = QueryTemplate(
    table="users",
    key_column="username",
    columns=("username", "password", "first_name", "last_name", "email", "is_admin"),
    order_by="username",
)
