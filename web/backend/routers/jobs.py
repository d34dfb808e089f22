#!/usr/bin/env python3
"""
Job endpoints - create, search, view, update and remove jobs.
"""

import logging
from typing import Optional

from fastapi import APIRouter, Depends, Query

from database.repositories import JobRepository
from ..auth import ensure_admin
from ..dependencies import get_job_repository
from ..models.requests import JobNew, JobUpdate
from ..models.responses import DeletedResponse, JobResponse, JobsResponse

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/jobs", tags=["jobs"])


@router.post("", status_code=201, response_model=JobResponse, dependencies=[Depends(ensure_admin)])
def create_job(
    body: JobNew,
    repo: JobRepository = Depends(get_job_repository)
):
    """
    Create a job.

    Authorization required: admin
    """
    job = repo.create(body.to_fields())
    repo.commit()
    return JobResponse(job=job)


@router.get("", response_model=JobsResponse)
def list_jobs(
    title: Optional[str] = Query(default=None, description="Case-insensitive title substring"),
    min_salary: Optional[str] = Query(default=None, alias="minSalary", description="Minimum salary"),
    has_equity: Optional[str] = Query(default=None, alias="hasEquity", description="true: equity > 0, false: no equity"),
    repo: JobRepository = Depends(get_job_repository)
):
    """
    List jobs, optionally filtered.

    Filters are combined with AND. Numeric filters are validated by the
    repository, so malformed values come back as 400.
    """
    jobs = repo.find_all(title=title, min_salary=min_salary, has_equity=has_equity)
    return JobsResponse(jobs=jobs)


@router.get("/{title}", response_model=JobResponse)
def get_job(
    title: str,
    repo: JobRepository = Depends(get_job_repository)
):
    """Get a job by title (case-insensitive)."""
    return JobResponse(job=repo.get(title))


@router.patch("/{title}", response_model=JobResponse, dependencies=[Depends(ensure_admin)])
def update_job(
    title: str,
    body: JobUpdate,
    repo: JobRepository = Depends(get_job_repository)
):
    """
    Partially update a job; only the fields sent are changed.

    Authorization required: admin
    """
    job = repo.update(title, body.to_fields())
    repo.commit()
    return JobResponse(job=job)


@router.delete("/{title}", response_model=DeletedResponse, dependencies=[Depends(ensure_admin)])
def delete_job(
    title: str,
    repo: JobRepository = Depends(get_job_repository)
):
    """
    Remove a job.

    Authorization required: admin
    """
    repo.remove(title)
    repo.commit()
    return DeletedResponse(deleted=title)
