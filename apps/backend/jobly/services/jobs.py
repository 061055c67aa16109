"""Job store operations.

Every operation is a single parameterized statement (plus a company lookup
for create/get). Update and remove detect a missing job from the empty
``RETURNING`` result rather than a separate existence check.
"""

import logging
from typing import Any, Mapping, NamedTuple

from jobly.database import Store
from jobly.errors import NotFoundError
from jobly.schemas.job import JobSearch
from jobly.services.companies import get_company
from jobly.utils.sql import WhereClause, sql_for_partial_update

logger = logging.getLogger(__name__)

# Logical (wire) field name -> jobs column. Updatable fields share their
# column name; the map only has to name the ones that differ.
JOB_FIELD_MAP = {
    "companyHandle": "company_handle",
}

JOB_COLUMNS = (
    'id, title, salary, equity, company_handle AS "companyHandle"'
)

SEARCH_BASE = (
    "SELECT j.id, j.title, j.salary, j.equity, "
    'j.company_handle AS "companyHandle", c.name AS "companyName" '
    "FROM jobs j LEFT JOIN companies AS c ON c.handle = j.company_handle"
)

SEARCH_ORDER = "ORDER BY title"


class SearchQuery(NamedTuple):
    query: str
    values: list[Any]


def build_search_query(filters: JobSearch | None = None) -> SearchQuery:
    """Assemble the job list query for the given filters.

    - title: case-insensitive substring match
    - min_salary: inclusive lower bound (0 is a real bound)
    - has_equity: only ``True`` restricts to jobs with equity > 0
    """
    where = WhereClause()
    if filters is not None:
        if filters.title:
            where.add("title ILIKE {}", f"%{filters.title}%")
        if filters.min_salary is not None:
            where.add("salary >= {}", filters.min_salary)
        if filters.has_equity is True:
            where.add("equity > 0")

    where_sql, values = where.render()
    parts = [SEARCH_BASE]
    if where_sql:
        parts.append(where_sql)
    parts.append(SEARCH_ORDER)
    return SearchQuery(" ".join(parts), values)


async def create(store: Store, data: Mapping[str, Any]) -> dict:
    """Create a job and return it with its company's name.

    Args:
        data: ``{title, companyHandle, salary, equity}``

    Returns:
        ``{id, title, salary, equity, companyHandle, companyName}``
    """
    rows = await store.execute(
        f"""INSERT INTO jobs (title, salary, equity, company_handle)
            VALUES ($1, $2, $3, $4)
            RETURNING {JOB_COLUMNS}""",
        [
            data["title"],
            data.get("salary"),
            data.get("equity"),
            data["companyHandle"],
        ],
    )
    job = rows[0]

    company = await get_company(store, job["companyHandle"])
    job["companyName"] = company["name"]

    logger.info(f"Created job {job['id']}: {job['title']} at {job['companyHandle']}")
    return job


async def find_all(store: Store, filters: JobSearch | None = None) -> list[dict]:
    """Find jobs matching the optional filters, ordered by title.

    Returns:
        ``[{id, title, salary, equity, companyHandle, companyName}, ...]``
    """
    query, values = build_search_query(filters)
    return await store.execute(query, values)


async def get(store: Store, job_id: int) -> dict:
    """Get a job with its owning company nested.

    Returns:
        ``{id, title, salary, equity, company}`` where company is
        ``{handle, name, description, numEmployees, logoUrl}``

    Raises:
        NotFoundError: If the job does not exist
    """
    rows = await store.execute(
        f"SELECT {JOB_COLUMNS} FROM jobs WHERE id = $1",
        [job_id],
    )
    if not rows:
        raise NotFoundError(f"No job: {job_id}")

    job = rows[0]
    job["company"] = await get_company(store, job.pop("companyHandle"))
    return job


async def update(store: Store, job_id: int, data: Mapping[str, Any]) -> dict:
    """Update a job with a partial payload.

    Only the given fields change. The payload must be non-empty and its keys
    must be known job fields.

    Returns:
        ``{id, title, salary, equity, companyHandle}``

    Raises:
        BadRequestError: If data is empty
        NotFoundError: If the job does not exist
    """
    set_cols, values = sql_for_partial_update(data, JOB_FIELD_MAP)
    id_placeholder = f"${len(values) + 1}"

    rows = await store.execute(
        f"""UPDATE jobs
            SET {set_cols}
            WHERE id = {id_placeholder}
            RETURNING {JOB_COLUMNS}""",
        [*values, job_id],
    )
    if not rows:
        raise NotFoundError(f"No job: {job_id}")

    logger.info(f"Updated job {job_id}: {', '.join(data)}")
    return rows[0]


async def remove(store: Store, job_id: int) -> None:
    """Delete a job.

    Raises:
        NotFoundError: If the job does not exist
    """
    rows = await store.execute(
        "DELETE FROM jobs WHERE id = $1 RETURNING id",
        [job_id],
    )
    if not rows:
        raise NotFoundError(f"No job: {job_id}")

    logger.info(f"Deleted job {job_id}")
