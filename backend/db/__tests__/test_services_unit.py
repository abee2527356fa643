"""
Unit tests for service-layer control flow with a mocked Session.

SQL text itself is covered by test_sql.py / test_filters.py / test_query_templates.py;
these check that services refuse bad input before touching the database
and report missing rows.

Run: pytest db/__tests__/test_services_unit.py -v
"""
from unittest.mock import MagicMock, patch

import pytest
from sqlalchemy.exc import IntegrityError

from db.company_service import create_company, remove_company, update_company
from db.jobs_service import remove_job, update_job
from db.sql import sql_for_partial_update
from db.user_service import authenticate_user, update_user
from utils.errors import BadRequestError


@pytest.fixture
def db():
    return MagicMock()


class TestUpdateRejectsBadInput:

    def test_company_empty(self, db):
        with pytest.raises(BadRequestError):
            update_company(db, "c1", {})
        db.execute.assert_not_called()

    def test_company_handle_not_updatable(self, db):
        with pytest.raises(BadRequestError):
            update_company(db, "c1", {"handle": "c2"})
        db.execute.assert_not_called()

    def test_job_company_not_updatable(self, db):
        with pytest.raises(BadRequestError):
            update_job(db, 1, {"companyHandle": "c2"})
        db.execute.assert_not_called()

    def test_user_username_not_updatable(self, db):
        with pytest.raises(BadRequestError):
            update_user(db, "u1", {"username": "u2"})
        db.execute.assert_not_called()


class TestUpdateExecutes:

    def test_company_update_commits(self, db):
        row = MagicMock()
        db.execute.return_value.scalar_one_or_none.return_value = row

        assert update_company(db, "c1", {"name": "New"}) is row
        db.execute.assert_called_once()
        db.commit.assert_called_once()

    def test_job_missing_returns_none(self, db):
        db.execute.return_value.scalar_one_or_none.return_value = None
        assert update_job(db, 99, {"title": "x"}) is None


class TestRemove:

    def test_company_missing(self, db):
        db.query.return_value.filter.return_value.first.return_value = None

        assert remove_company(db, "nope") is False
        db.delete.assert_not_called()

    def test_job_deleted(self, db):
        db.query.return_value.filter.return_value.delete.return_value = 1
        assert remove_job(db, 5) is True

    def test_job_missing(self, db):
        db.query.return_value.filter.return_value.delete.return_value = 0
        assert remove_job(db, 5) is False


def test_authenticate_unknown_user(db):
    db.query.return_value.filter.return_value.first.return_value = None
    assert authenticate_user(db, "nobody", "pw") is None


class TestDuplicateCompany:

    def test_create_rolls_back(self, db):
        db.commit.side_effect = IntegrityError("INSERT", {}, Exception("duplicate key"))

        with pytest.raises(BadRequestError, match="Duplicate company: c9 / C1"):
            create_company(db, handle="c9", name="C1")
        db.rollback.assert_called_once()

    def test_update_rolls_back(self, db):
        db.execute.side_effect = IntegrityError("UPDATE", {}, Exception("duplicate key"))

        with pytest.raises(BadRequestError, match="Duplicate company name: C2"):
            update_company(db, "c1", {"name": "C2"})
        db.rollback.assert_called_once()
        db.commit.assert_not_called()


class TestUserUpdateNormalizes:

    def test_null_password(self, db):
        with pytest.raises(BadRequestError):
            update_user(db, "u1", {"password": None})
        db.execute.assert_not_called()

    def test_email_lowercased(self, db):
        with patch("db.user_service.sql_for_partial_update", wraps=sql_for_partial_update) as build:
            update_user(db, "u1", {"email": "U1@Email.COM"})

        assert build.call_args.args[0] == {"email": "u1@email.com"}
