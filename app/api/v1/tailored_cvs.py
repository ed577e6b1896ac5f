"""
Tailored CV API Endpoints

- Generate (or reuse) a CV tailored for a job posting
- List the caller's tailored CVs
- Download a generated tailored CV
"""

from typing import List

import structlog
from fastapi import APIRouter, HTTPException, Path, Response, status

from app.api.dependencies import TailoringServiceDep, map_domain_exception_to_http
from app.api.schemas.tailored_cv_schemas import (
    TailoredCVResponse,
    TailorRequest,
    TailorResponse,
)
from app.application.tailoring_service import TailoringRequest
from app.core.dependencies import CurrentUserDep
from app.domain.exceptions import DomainException

logger = structlog.get_logger(__name__)
router = APIRouter(prefix="/tailored-cvs", tags=["tailored-cvs"])


@router.post(
    "",
    response_model=TailorResponse,
    status_code=status.HTTP_201_CREATED,
    responses={200: {"model": TailorResponse, "description": "Existing tailored CV reused"}},
    summary="Generate a tailored CV",
)
async def create_tailored_cv(
    payload: TailorRequest,
    response: Response,
    current_user: CurrentUserDep,
    tailoring_service: TailoringServiceDep,
):
    """
    Tailor a base CV for a job.

    Returns 200 with the existing outcome when one with a generated summary
    exists and ``force`` is false; otherwise generates the document and
    returns 201.
    """
    try:
        result = await tailoring_service.tailor(
            TailoringRequest(
                owner_id=current_user.user_id,
                cv_id=payload.cv_id,
                job_id=payload.job_id,
                force=payload.force,
            )
        )
    except DomainException as domain_exc:
        raise map_domain_exception_to_http(domain_exc)
    except Exception as e:
        logger.error("Tailored CV generation failed", error=str(e), error_type=type(e).__name__)
        raise HTTPException(status_code=500, detail="Failed to generate tailored CV")

    if result.reused:
        response.status_code = status.HTTP_200_OK
        message = "Tailored CV already exists"
    else:
        message = "Tailored CV generated successfully"

    return TailorResponse(
        message=message,
        reused=result.reused,
        tailored_cv=TailoredCVResponse.from_domain(result.tailored_cv),
    )


@router.get("", response_model=List[TailoredCVResponse], summary="List my tailored CVs")
async def list_tailored_cvs(
    current_user: CurrentUserDep,
    tailoring_service: TailoringServiceDep,
):
    try:
        outcomes = await tailoring_service.list_for_user(current_user.user_id)
    except DomainException as domain_exc:
        raise map_domain_exception_to_http(domain_exc)
    except Exception as e:
        logger.error("Failed to list tailored CVs", error=str(e))
        raise HTTPException(status_code=500, detail="Failed to fetch tailored CVs")

    return [TailoredCVResponse.from_domain(outcome) for outcome in outcomes]


@router.get(
    "/download/{tailored_cv_id}",
    response_class=Response,
    responses={200: {"content": {"application/pdf": {}}}},
    summary="Download a tailored CV",
)
async def download_tailored_cv(
    current_user: CurrentUserDep,
    tailoring_service: TailoringServiceDep,
    tailored_cv_id: str = Path(..., description="Tailored CV identifier"),
):
    """Stream the generated PDF as an attachment."""
    try:
        outcome, content = await tailoring_service.get_document(tailored_cv_id, current_user.user_id)
    except DomainException as domain_exc:
        raise map_domain_exception_to_http(domain_exc)
    except Exception as e:
        logger.error("Tailored CV download failed", tailored_cv_id=tailored_cv_id, error=str(e))
        raise HTTPException(status_code=500, detail="Failed to download tailored CV")

    return Response(
        content=content,
        media_type="application/pdf",
        headers={
            "Content-Disposition": f'attachment; filename="{outcome.download_filename()}"',
        },
    )
