"""
Tests for services/jobs.py - query assembly and job store operations.
"""

import asyncio
from decimal import Decimal

import pytest

from jobly.errors import BadRequestError, NotFoundError
from jobly.schemas.job import JobSearch
from jobly.services import jobs
from jobly.services.jobs import JOB_FIELD_MAP, SEARCH_BASE, build_search_query
from jobly.utils.sql import sql_for_partial_update


class TestBuildSearchQuery:
    """Test the filtered job list query."""

    def test_no_filters_has_no_where(self):
        query, values = build_search_query(JobSearch())
        assert "WHERE" not in query
        assert query == f"{SEARCH_BASE} ORDER BY title"
        assert values == []

    def test_none_filters(self):
        query, values = build_search_query(None)
        assert "WHERE" not in query
        assert values == []

    def test_min_salary_only_is_first_placeholder(self):
        query, values = build_search_query(JobSearch(minSalary=199))
        assert "WHERE salary >= $1 ORDER BY title" in query
        assert "$2" not in query
        assert values == [199]

    def test_min_salary_zero_is_applied(self):
        query, values = build_search_query(JobSearch(minSalary=0))
        assert "salary >= $1" in query
        assert values == [0]

    def test_title_is_case_insensitive_substring(self):
        query, values = build_search_query(JobSearch(title="Job1"))
        assert "WHERE title ILIKE $1" in query
        assert values == ["%Job1%"]

    def test_empty_title_is_ignored(self):
        query, values = build_search_query(JobSearch(title=""))
        assert "WHERE" not in query
        assert values == []

    def test_equity_and_min_salary(self):
        query, values = build_search_query(JobSearch(hasEquity=True, minSalary=199))
        assert "WHERE salary >= $1 AND equity > 0 ORDER BY title" in query
        assert values == [199]

    def test_has_equity_false_is_ignored(self):
        query, values = build_search_query(JobSearch(hasEquity=False))
        assert "equity" not in query.split("FROM", 1)[1]
        assert values == []

    def test_all_filters(self):
        query, values = build_search_query(
            JobSearch(title="eng", minSalary=50, hasEquity=True)
        )
        assert "WHERE title ILIKE $1 AND salary >= $2 AND equity > 0" in query
        assert query.endswith("ORDER BY title")
        assert values == ["%eng%", 50]

    def test_accepts_wire_names(self):
        filters = JobSearch.model_validate({"minSalary": 10, "hasEquity": True})
        _, values = build_search_query(filters)
        assert values == [10]


class TestCreate:
    """Test job creation."""

    def test_create_returns_job_with_company_name(self, store, job_row, company_c1):
        store.queue(job_row).queue(company_c1)
        data = {
            "title": "Job1",
            "companyHandle": "c1",
            "salary": 100,
            "equity": Decimal("0.1"),
        }

        job = asyncio.run(jobs.create(store, data))

        assert job == {**job_row, "companyName": "C1"}
        insert_sql, insert_values = store.calls[0]
        assert insert_sql.startswith("INSERT INTO jobs")
        assert insert_values == ["Job1", 100, Decimal("0.1"), "c1"]
        assert store.calls[1][1] == ["c1"]

    def test_create_optional_fields_default_to_none(self, store, job_row, company_c1):
        store.queue({**job_row, "salary": None, "equity": None}).queue(company_c1)

        asyncio.run(jobs.create(store, {"title": "Job1", "companyHandle": "c1"}))

        assert store.calls[0][1] == ["Job1", None, None, "c1"]


class TestFindAll:
    """Test job listing."""

    def test_find_all_passes_query_and_values(self, store):
        rows = [
            {"id": 2, "title": "Job2", "salary": 200, "equity": Decimal("0.2"),
             "companyHandle": "c1", "companyName": "C1"},
        ]
        store.queue(*rows)

        result = asyncio.run(jobs.find_all(store, JobSearch(hasEquity=True, minSalary=199)))

        assert result == rows
        sql, values = store.calls[0]
        assert "salary >= $1 AND equity > 0" in sql
        assert values == [199]

    def test_find_all_without_filters(self, store):
        asyncio.run(jobs.find_all(store))
        sql, values = store.calls[0]
        assert "WHERE" not in sql
        assert values == []


class TestGet:
    """Test fetching one job."""

    def test_get_nests_company(self, store, job_row, company_c1):
        store.queue(job_row).queue(company_c1)

        job = asyncio.run(jobs.get(store, 1))

        assert job == {
            "id": 1,
            "title": "Job1",
            "salary": 100,
            "equity": Decimal("0.1"),
            "company": company_c1,
        }
        assert store.calls[0][1] == [1]
        assert store.calls[1][1] == ["c1"]

    def test_get_not_found(self, store):
        with pytest.raises(NotFoundError):
            asyncio.run(jobs.get(store, 999))
        assert len(store.calls) == 1


class TestUpdate:
    """Test partial updates."""

    def test_update_binds_id_after_fields(self, store, job_row):
        updated = {**job_row, "title": "update", "salary": 111}
        store.queue(updated)

        job = asyncio.run(jobs.update(store, 1, {"title": "update", "salary": 111}))

        assert job == updated
        sql, values = store.calls[0]
        assert 'SET "title"=$1, "salary"=$2' in sql
        assert "WHERE id = $3" in sql
        assert values == ["update", 111, 1]

    def test_field_map_renames_company_handle(self):
        set_cols, values = sql_for_partial_update(
            {"title": "x", "companyHandle": "c2"}, JOB_FIELD_MAP
        )
        assert set_cols == '"title"=$1, "company_handle"=$2'
        assert values == ["x", "c2"]

    def test_update_empty_payload_fails_before_query(self, store):
        with pytest.raises(BadRequestError):
            asyncio.run(jobs.update(store, 1, {}))
        assert store.calls == []

    def test_update_not_found(self, store):
        with pytest.raises(NotFoundError):
            asyncio.run(jobs.update(store, 0, {"title": "x"}))
        # Detected from the empty RETURNING, no separate lookup
        assert len(store.calls) == 1
        assert store.calls[0][0].lstrip().startswith("UPDATE jobs")


class TestRemove:
    """Test deletes."""

    def test_remove(self, store):
        store.queue({"id": 1})
        asyncio.run(jobs.remove(store, 1))
        assert store.calls == [("DELETE FROM jobs WHERE id = $1 RETURNING id", [1])]

    def test_remove_not_found(self, store):
        with pytest.raises(NotFoundError):
            asyncio.run(jobs.remove(store, 0))
