"""
SQL fragment helpers shared by the service layer.

Fragments use PostgreSQL-style positional placeholders ($1, $2, ...) so they
can be composed by position before execution. SqlFragment.bind() rewrites
them into SQLAlchemy named binds (:p1, :p2, ...) for Session.execute().
"""

import re
from dataclasses import dataclass
from typing import Any, Iterable, Mapping

from sqlalchemy import TextClause, text

from utils.errors import BadRequestError

_PLACEHOLDER = re.compile(r"\$(\d+)")


@dataclass(frozen=True)
class SqlFragment:
    """
    A parameterized piece of SQL and its positional values.

    Invariant: clause contains exactly len(values) placeholders, numbered
    $1..$n in the order the values were appended.
    """
    clause: str
    values: tuple[Any, ...] = ()

    def bind(self) -> TextClause:
        """
        Convert to an executable SQLAlchemy text clause.

        Example:
            SqlFragment("name ILIKE $1", ("%net%",)).bind()
            -> text("name ILIKE :p1") with p1="%net%"
        """
        sql = _PLACEHOLDER.sub(lambda m: f":p{m.group(1)}", self.clause)
        params = {f"p{i}": value for i, value in enumerate(self.values, start=1)}
        return text(sql).bindparams(**params) if params else text(sql)


def sql_for_partial_update(
    data_to_update: Mapping[str, Any],
    js_to_sql: Mapping[str, str],
    allowed_fields: Iterable[str],
) -> SqlFragment:
    """
    Build the SET clause of a partial UPDATE.

    Keys of data_to_update are logical (camelCase) field names. Each becomes
    "<column>"=$<n>, where the column comes from js_to_sql and falls back to
    the logical name itself. The fallback is only reached for names in
    allowed_fields, the entity's closed set of updatable fields, so no
    caller-chosen identifier ever reaches the SQL text.

    Args:
        data_to_update: {field: new value}, in the order to emit
        js_to_sql: Translation for fields whose column name differs
        allowed_fields: Every field the entity accepts in an update

    Returns:
        SqlFragment, e.g. for ({"firstName": "Aliya", "age": 32}, {"firstName": "first_name"}):
            clause='"first_name"=$1, "age"=$2', values=("Aliya", 32)

    Raises:
        BadRequestError: If data_to_update is empty or names an unknown field
    """
    keys = list(data_to_update)
    if not keys:
        raise BadRequestError("No data")

    allowed = {str(getattr(f, "value", f)) for f in allowed_fields}
    unknown = [key for key in keys if key not in allowed]
    if unknown:
        raise BadRequestError(f"Cannot update field(s): {', '.join(unknown)}")

    # {firstName: 'Aliya', age: 32} => ['"first_name"=$1', '"age"=$2']
    cols = [
        f'"{js_to_sql.get(col_name, col_name)}"=${idx}'
        for idx, col_name in enumerate(keys, start=1)
    ]

    return SqlFragment(
        clause=", ".join(cols),
        values=tuple(data_to_update[key] for key in keys),
    )
