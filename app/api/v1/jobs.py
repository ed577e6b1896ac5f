"""
Job Posting API Endpoints

- Paginated, filterable job listing
- Job creation, status updates and deletion
"""

from typing import Optional

import structlog
from fastapi import APIRouter, HTTPException, Path, Query, status

from app.api.dependencies import JobServiceDep, map_domain_exception_to_http
from app.api.schemas.job_schemas import (
    JobCreateRequest,
    JobFilters,
    JobListResponse,
    JobMessageResponse,
    JobResponse,
    JobStatusRequest,
)
from app.application.job_service import DEFAULT_PAGE_SIZE, MAX_PAGE_SIZE
from app.core.dependencies import CurrentUserDep
from app.domain.exceptions import DomainException

logger = structlog.get_logger(__name__)
router = APIRouter(prefix="/jobs", tags=["jobs"])


@router.get("", response_model=JobListResponse, summary="List jobs")
async def list_jobs(
    current_user: CurrentUserDep,
    job_service: JobServiceDep,
    limit: int = Query(DEFAULT_PAGE_SIZE, ge=1, le=MAX_PAGE_SIZE),
    offset: int = Query(0, ge=0),
    job_type: Optional[str] = Query(None, alias="type", description="Employment type filter"),
    location: Optional[str] = Query(None, description="Location filter"),
):
    """Newest first; a filter also matches jobs that leave that field empty."""
    try:
        jobs = await job_service.list_jobs(
            job_type=job_type, location=location, limit=limit, offset=offset
        )
    except DomainException as domain_exc:
        raise map_domain_exception_to_http(domain_exc)
    except Exception as e:
        logger.error("Failed to list jobs", error=str(e))
        raise HTTPException(status_code=500, detail="Failed to fetch jobs")

    return JobListResponse(
        count=len(jobs),
        limit=limit,
        offset=offset,
        filters=JobFilters(type=job_type or None, location=location or None),
        jobs=[JobResponse.from_domain(job) for job in jobs],
    )


@router.get("/{job_id}", response_model=JobResponse, summary="Get a job")
async def get_job(
    current_user: CurrentUserDep,
    job_service: JobServiceDep,
    job_id: str = Path(..., description="Job identifier"),
):
    try:
        job = await job_service.get_job(job_id)
    except DomainException as domain_exc:
        raise map_domain_exception_to_http(domain_exc)
    except Exception as e:
        logger.error("Failed to fetch job", job_id=job_id, error=str(e))
        raise HTTPException(status_code=500, detail="Failed to fetch job")

    return JobResponse.from_domain(job)


@router.post(
    "",
    response_model=JobMessageResponse,
    status_code=status.HTTP_201_CREATED,
    summary="Create a job",
)
async def create_job(
    payload: JobCreateRequest,
    current_user: CurrentUserDep,
    job_service: JobServiceDep,
):
    try:
        job = await job_service.create_job(
            payload.title,
            company=payload.company,
            description=payload.description,
            location=payload.location,
            type=payload.type,
            requirements=payload.requirements,
        )
    except DomainException as domain_exc:
        raise map_domain_exception_to_http(domain_exc)
    except Exception as e:
        logger.error("Failed to create job", error=str(e))
        raise HTTPException(status_code=500, detail="Failed to create job")

    return JobMessageResponse(message="Job created successfully", job=JobResponse.from_domain(job))


@router.put("/{job_id}/status", response_model=JobMessageResponse, summary="Update job status")
async def update_job_status(
    payload: JobStatusRequest,
    current_user: CurrentUserDep,
    job_service: JobServiceDep,
    job_id: str = Path(..., description="Job identifier"),
):
    try:
        job = await job_service.update_status(job_id, payload.status)
    except DomainException as domain_exc:
        raise map_domain_exception_to_http(domain_exc)
    except Exception as e:
        logger.error("Failed to update job status", job_id=job_id, error=str(e))
        raise HTTPException(status_code=500, detail="Failed to update job status")

    return JobMessageResponse(message="Job status updated", job=JobResponse.from_domain(job))


@router.delete("/{job_id}", response_model=JobMessageResponse, summary="Delete a job")
async def delete_job(
    current_user: CurrentUserDep,
    job_service: JobServiceDep,
    job_id: str = Path(..., description="Job identifier"),
):
    try:
        job = await job_service.delete_job(job_id)
    except DomainException as domain_exc:
        raise map_domain_exception_to_http(domain_exc)
    except Exception as e:
        logger.error("Failed to delete job", job_id=job_id, error=str(e))
        raise HTTPException(status_code=500, detail="Failed to delete job")

    return JobMessageResponse(message="Job deleted successfully", job=JobResponse.from_domain(job))
