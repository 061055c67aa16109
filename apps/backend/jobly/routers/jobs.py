"""Jobs API router.

Reads are public. Creating, updating and deleting a job requires an admin
token.
"""

import logging

from fastapi import APIRouter, Depends, Request, status
from pydantic import ValidationError

from jobly.auth import ensure_admin
from jobly.database import Store, get_store
from jobly.errors import BadRequestError
from jobly.schemas.job import (
    JobCreate,
    JobCreateResponse,
    JobDeleteResponse,
    JobDetailResponse,
    JobListResponse,
    JobSearch,
    JobUpdate,
    JobUpdateResponse,
)
from jobly.services import jobs as job_store

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/v1/jobs", tags=["jobs"])


def parse_search(request: Request) -> JobSearch:
    """Coerce query-string filters into a JobSearch.

    ``hasEquity`` is true only for the literal ``"true"``; unknown keys and
    non-numeric ``minSalary`` are rejected.
    """
    query = dict(request.query_params)
    if "hasEquity" in query:
        query["hasEquity"] = query["hasEquity"] == "true"
    try:
        return JobSearch.model_validate(query)
    except ValidationError as e:
        raise BadRequestError([err["msg"] for err in e.errors()])


@router.post(
    "",
    response_model=JobCreateResponse,
    status_code=status.HTTP_201_CREATED,
    summary="Create a new job",
    dependencies=[Depends(ensure_admin)],
)
async def create_job(
    job_data: JobCreate,
    store: Store = Depends(get_store),
) -> JobCreateResponse:
    """Create a job.

    Args:
        job_data: Job creation data (title, companyHandle, salary, equity)
        store: Query store

    Returns:
        ``{job: {id, title, salary, equity, companyHandle, companyName}}``
    """
    job = await job_store.create(store, job_data.model_dump(by_alias=True))
    return JobCreateResponse.model_validate({"job": job})


@router.get(
    "",
    response_model=JobListResponse,
    summary="List jobs",
)
async def list_jobs(
    filters: JobSearch = Depends(parse_search),
    store: Store = Depends(get_store),
) -> JobListResponse:
    """List jobs, optionally filtered by title, minSalary and hasEquity."""
    jobs = await job_store.find_all(store, filters)
    return JobListResponse.model_validate({"jobs": jobs})


@router.get(
    "/{job_id}",
    response_model=JobDetailResponse,
    summary="Get a specific job",
)
async def get_job(
    job_id: int,
    store: Store = Depends(get_store),
) -> JobDetailResponse:
    """Get a single job with its company.

    Raises:
        NotFoundError: Job not found (404)
    """
    job = await job_store.get(store, job_id)
    return JobDetailResponse.model_validate({"job": job})


@router.patch(
    "/{job_id}",
    response_model=JobUpdateResponse,
    summary="Update a job",
    dependencies=[Depends(ensure_admin)],
)
async def update_job(
    job_id: int,
    job_data: JobUpdate,
    store: Store = Depends(get_store),
) -> JobUpdateResponse:
    """Update title, salary and/or equity of a job.

    Raises:
        BadRequestError: Empty payload (400)
        NotFoundError: Job not found (404)
    """
    update_data = job_data.model_dump(exclude_unset=True, by_alias=True)
    job = await job_store.update(store, job_id, update_data)
    return JobUpdateResponse.model_validate({"job": job})


@router.delete(
    "/{job_id}",
    response_model=JobDeleteResponse,
    summary="Delete a job",
    dependencies=[Depends(ensure_admin)],
)
async def delete_job(
    job_id: int,
    store: Store = Depends(get_store),
) -> JobDeleteResponse:
    """Delete a job by ID.

    Raises:
        NotFoundError: Job not found (404)
    """
    await job_store.remove(store, job_id)
    return JobDeleteResponse(deleted=job_id)
