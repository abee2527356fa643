"""
WHERE-clause builders for the company and job listing queries.

Each builder takes optional search criteria keyed by logical (camelCase)
name and returns a SqlFragment. Criteria are ANDed together in a fixed
order, which also fixes the placeholder numbering. Missing or falsy
criteria are skipped rather than treated as "match nothing".
"""

from decimal import Decimal
from typing import Any, Mapping, Optional

from db.sql import SqlFragment


def _non_negative_number(value: Any) -> bool:
    """True for numbers >= 0 (0 included). Booleans are not counts."""
    return isinstance(value, (int, float, Decimal)) and not isinstance(value, bool) and value >= 0


def _where(fragments: list[str], values: list) -> SqlFragment:
    if not fragments:
        return SqlFragment("", ())
    return SqlFragment("WHERE " + " AND ".join(fragments), tuple(values))


def company_filter(criteria: Optional[Mapping[str, Any]] = None) -> SqlFragment:
    """
    Build the WHERE clause for listing companies.

    Recognized criteria (evaluated in this order):
    - nameLike: case-insensitive substring match on name
    - minEmployees: inclusive lower bound on num_employees
    - maxEmployees: inclusive upper bound on num_employees

    nameLike is wrapped in % wildcards as-is; embedded % and _ are not
    escaped. minEmployees > maxEmployees is not rejected here (the route
    validates the range); it simply matches no rows.

    Example:
        company_filter({"nameLike": "net"})
        -> SqlFragment("WHERE name ILIKE $1", ("%net%",))
    """
    criteria = criteria or {}
    fragments: list[str] = []
    values: list = []

    name_like = criteria.get("nameLike")
    if name_like:
        values.append(f"%{name_like}%")
        fragments.append(f"name ILIKE ${len(values)}")

    min_employees = criteria.get("minEmployees")
    if _non_negative_number(min_employees):
        values.append(min_employees)
        fragments.append(f"${len(values)} <= num_employees")

    max_employees = criteria.get("maxEmployees")
    if _non_negative_number(max_employees):
        values.append(max_employees)
        fragments.append(f"num_employees <= ${len(values)}")

    return _where(fragments, values)


def job_filter(criteria: Optional[Mapping[str, Any]] = None) -> SqlFragment:
    """
    Build the WHERE clause for listing jobs.

    Recognized criteria (evaluated in this order):
    - title: case-insensitive substring match on title
    - minSalary: inclusive lower bound on salary
    - hasEquity: when exactly True, only jobs with equity > 0.
      False or missing does not filter anything out.

    Example:
        job_filter({"minSalary": 1, "hasEquity": True})
        -> SqlFragment("WHERE $1 <= salary AND equity > $2", (1, 0))
    """
    criteria = criteria or {}
    fragments: list[str] = []
    values: list = []

    title = criteria.get("title")
    if title:
        values.append(f"%{title}%")
        fragments.append(f"title ILIKE ${len(values)}")

    min_salary = criteria.get("minSalary")
    if _non_negative_number(min_salary):
        values.append(min_salary)
        fragments.append(f"${len(values)} <= salary")

    # 0 goes through a placeholder too so every literal stays parameterized
    if criteria.get("hasEquity") is True:
        values.append(0)
        fragments.append(f"equity > ${len(values)}")

    return _where(fragments, values)
