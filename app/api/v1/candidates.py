"""Candidate API Endpoints"""

from typing import List

import structlog
from fastapi import APIRouter, HTTPException, Path, status

from app.api.dependencies import CandidateServiceDep, map_domain_exception_to_http
from app.api.schemas.base import MessageResponse
from app.api.schemas.candidate_schemas import CandidateCreateRequest, CandidateResponse
from app.core.dependencies import CurrentUserDep
from app.domain.exceptions import DomainException

logger = structlog.get_logger(__name__)
router = APIRouter(prefix="/candidates", tags=["candidates"])


@router.post(
    "",
    response_model=CandidateResponse,
    status_code=status.HTTP_201_CREATED,
    summary="Create a candidate",
)
async def create_candidate(
    payload: CandidateCreateRequest,
    current_user: CurrentUserDep,
    candidate_service: CandidateServiceDep,
):
    try:
        candidate = await candidate_service.create(
            payload.first_name, payload.last_name, payload.email
        )
    except DomainException as domain_exc:
        raise map_domain_exception_to_http(domain_exc)
    except Exception as e:
        logger.error("Failed to create candidate", error=str(e))
        raise HTTPException(status_code=500, detail="Failed to create candidate")

    return CandidateResponse.from_domain(candidate)


@router.get("", response_model=List[CandidateResponse], summary="List candidates")
async def list_candidates(current_user: CurrentUserDep, candidate_service: CandidateServiceDep):
    try:
        candidates = await candidate_service.list()
    except DomainException as domain_exc:
        raise map_domain_exception_to_http(domain_exc)
    except Exception as e:
        logger.error("Failed to list candidates", error=str(e))
        raise HTTPException(status_code=500, detail="Failed to fetch candidates")

    return [CandidateResponse.from_domain(candidate) for candidate in candidates]


@router.get("/{candidate_id}", response_model=CandidateResponse, summary="Get a candidate")
async def get_candidate(
    current_user: CurrentUserDep,
    candidate_service: CandidateServiceDep,
    candidate_id: str = Path(..., description="Candidate identifier"),
):
    try:
        candidate = await candidate_service.get(candidate_id)
    except DomainException as domain_exc:
        raise map_domain_exception_to_http(domain_exc)
    except Exception as e:
        logger.error("Failed to fetch candidate", candidate_id=candidate_id, error=str(e))
        raise HTTPException(status_code=500, detail="Failed to fetch candidate")

    return CandidateResponse.from_domain(candidate)


@router.delete("/{candidate_id}", response_model=MessageResponse, summary="Delete a candidate")
async def delete_candidate(
    current_user: CurrentUserDep,
    candidate_service: CandidateServiceDep,
    candidate_id: str = Path(..., description="Candidate identifier"),
):
    try:
        await candidate_service.delete(candidate_id)
    except DomainException as domain_exc:
        raise map_domain_exception_to_http(domain_exc)
    except Exception as e:
        logger.error("Failed to delete candidate", candidate_id=candidate_id, error=str(e))
        raise HTTPException(status_code=500, detail="Failed to delete candidate")

    return MessageResponse(message="Candidate deleted successfully")
