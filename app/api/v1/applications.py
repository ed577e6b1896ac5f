"""
Job Application API Endpoints

- Apply to a job with a new upload or an existing CV
- List the caller's applications
- Admin: list all applications and update their status
"""

from typing import List, Optional

import structlog
from fastapi import APIRouter, File, Form, HTTPException, Path, UploadFile, status

from app.api.dependencies import JobApplicationServiceDep, map_domain_exception_to_http
from app.api.schemas.application_schemas import (
    AdminApplicationItem,
    ApplicationMessageResponse,
    ApplicationResponse,
    ApplicationStatusRequest,
    UserApplicationItem,
)
from app.api.uploads import read_upload
from app.core.config import get_settings
from app.core.dependencies import AdminUserDep, CurrentUserDep
from app.domain.exceptions import DomainException

logger = structlog.get_logger(__name__)
router = APIRouter(prefix="/applications", tags=["applications"])


@router.post(
    "/apply/{job_id}",
    response_model=ApplicationMessageResponse,
    status_code=status.HTTP_201_CREATED,
    summary="Apply to a job",
)
async def apply_to_job(
    current_user: CurrentUserDep,
    application_service: JobApplicationServiceDep,
    job_id: str = Path(..., description="Job identifier"),
    cv: Optional[UploadFile] = File(None, description="CV to upload with the application"),
    cv_id: Optional[str] = Form(None, description="Existing CV to apply with"),
    tailored_cv_id: Optional[str] = Form(None, description="Tailored CV to attach"),
):
    try:
        upload = await read_upload(cv, get_settings().MAX_CV_SIZE)
        application = await application_service.apply(
            current_user.user_id,
            job_id,
            upload=upload,
            cv_id=cv_id,
            tailored_cv_id=tailored_cv_id,
        )
    except DomainException as domain_exc:
        raise map_domain_exception_to_http(domain_exc)
    except Exception as e:
        logger.error("Apply job error", job_id=job_id, error=str(e))
        raise HTTPException(status_code=500, detail="Failed to submit application")

    return ApplicationMessageResponse(
        message="Application submitted successfully",
        application=ApplicationResponse.from_domain(application),
    )


@router.get("", response_model=List[UserApplicationItem], summary="List my applications")
async def list_my_applications(
    current_user: CurrentUserDep,
    application_service: JobApplicationServiceDep,
):
    try:
        views = await application_service.list_for_user(current_user.user_id)
    except DomainException as domain_exc:
        raise map_domain_exception_to_http(domain_exc)
    except Exception as e:
        logger.error("Failed to list applications", error=str(e))
        raise HTTPException(status_code=500, detail="Failed to fetch applications")

    return [UserApplicationItem.from_view(view) for view in views]


@router.get("/all", response_model=List[AdminApplicationItem], summary="List all applications")
async def list_all_applications(
    admin_user: AdminUserDep,
    application_service: JobApplicationServiceDep,
):
    try:
        views = await application_service.list_all()
    except DomainException as domain_exc:
        raise map_domain_exception_to_http(domain_exc)
    except Exception as e:
        logger.error("Failed to list all applications", error=str(e))
        raise HTTPException(status_code=500, detail="Failed to fetch applications")

    return [AdminApplicationItem.from_view(view) for view in views]


@router.put(
    "/{application_id}",
    response_model=ApplicationMessageResponse,
    summary="Update application status",
)
async def update_application_status(
    payload: ApplicationStatusRequest,
    admin_user: AdminUserDep,
    application_service: JobApplicationServiceDep,
    application_id: str = Path(..., description="Application identifier"),
):
    try:
        application = await application_service.update_status(application_id, payload.status)
    except DomainException as domain_exc:
        raise map_domain_exception_to_http(domain_exc)
    except Exception as e:
        logger.error("Failed to update application", application_id=application_id, error=str(e))
        raise HTTPException(status_code=500, detail="Failed to update application")

    return ApplicationMessageResponse(
        message="Application status updated",
        application=ApplicationResponse.from_domain(application),
    )
