"""
Tests for the company and job WHERE-clause builders.

Run: pytest db/__tests__/test_filters.py -v
"""
from db.filters import company_filter, job_filter
from db.sql import SqlFragment


class TestCompanyFilter:
    """Run: pytest db/__tests__/test_filters.py::TestCompanyFilter -v"""

    def test_no_criteria(self):
        assert company_filter() == SqlFragment("", ())
        assert company_filter({}) == SqlFragment("", ())

    def test_name_like(self):
        result = company_filter({"nameLike": "net"})

        assert result.clause == "WHERE name ILIKE $1"
        assert result.values == ("%net%",)

    def test_employee_range(self):
        result = company_filter({"minEmployees": 2, "maxEmployees": 10})

        assert result.clause == "WHERE $1 <= num_employees AND num_employees <= $2"
        assert result.values == (2, 10)

    def test_all_criteria_fixed_order(self):
        """Order is nameLike, minEmployees, maxEmployees regardless of input order."""
        result = company_filter({"maxEmployees": 500, "minEmployees": 5, "nameLike": "co"})

        assert result.clause == (
            "WHERE name ILIKE $1 AND $2 <= num_employees AND num_employees <= $3"
        )
        assert result.values == ("%co%", 5, 500)

    def test_zero_is_a_bound(self):
        result = company_filter({"minEmployees": 0})

        assert result.clause == "WHERE $1 <= num_employees"
        assert result.values == (0,)

    def test_skips_missing_and_invalid(self):
        """None, empty strings and negative numbers contribute nothing."""
        result = company_filter({"nameLike": "", "minEmployees": None, "maxEmployees": -1})
        assert result == SqlFragment("", ())

    def test_inverted_range_not_rejected(self):
        result = company_filter({"minEmployees": 10, "maxEmployees": 2})
        assert result.values == (10, 2)

    def test_wildcards_not_escaped(self):
        result = company_filter({"nameLike": "50%_off"})
        assert result.values == ("%50%_off%",)


class TestJobFilter:
    """Run: pytest db/__tests__/test_filters.py::TestJobFilter -v"""

    def test_no_criteria(self):
        assert job_filter(None) == SqlFragment("", ())

    def test_min_salary_and_equity(self):
        result = job_filter({"minSalary": 1, "hasEquity": True})

        assert result.clause == "WHERE $1 <= salary AND equity > $2"
        assert result.values == (1, 0)

    def test_has_equity_false_adds_nothing(self):
        assert job_filter({"hasEquity": False}) == SqlFragment("", ())

    def test_has_equity_must_be_true(self):
        """Truthy non-bool values are not True."""
        assert job_filter({"hasEquity": "true"}) == SqlFragment("", ())

    def test_title(self):
        result = job_filter({"title": "engineer"})

        assert result.clause == "WHERE title ILIKE $1"
        assert result.values == ("%engineer%",)

    def test_all_criteria(self):
        result = job_filter({"hasEquity": True, "title": "2", "minSalary": 0})

        assert result.clause == "WHERE title ILIKE $1 AND $2 <= salary AND equity > $3"
        assert result.values == ("%2%", 0, 0)

    def test_repeated_calls_identical(self):
        criteria = {"title": "dev", "minSalary": 100}
        assert job_filter(criteria) == job_filter(criteria)
