"""
CV API Endpoints

- Upload a base CV (PDF or Word)
- List, download and delete the caller's CVs
"""

from typing import List, Optional

import structlog
from fastapi import APIRouter, File, HTTPException, Path, Response, UploadFile, status

from app.api.dependencies import CVServiceDep, map_domain_exception_to_http
from app.api.schemas.base import MessageResponse
from app.api.schemas.cv_schemas import CVResponse, CVUploadResponse
from app.api.uploads import read_upload
from app.core.config import get_settings
from app.core.dependencies import CurrentUserDep
from app.domain.exceptions import DomainException

logger = structlog.get_logger(__name__)
router = APIRouter(prefix="/cvs", tags=["cvs"])


@router.post(
    "/upload",
    response_model=CVUploadResponse,
    status_code=status.HTTP_201_CREATED,
    summary="Upload a CV",
)
async def upload_cv(
    current_user: CurrentUserDep,
    cv_service: CVServiceDep,
    cv: Optional[UploadFile] = File(None, description="PDF, DOC or DOCX, at most 5 MB"),
):
    try:
        upload = await read_upload(cv, get_settings().MAX_CV_SIZE)
        document = await cv_service.upload(current_user.user_id, upload)
    except DomainException as domain_exc:
        raise map_domain_exception_to_http(domain_exc)
    except Exception as e:
        logger.error("CV upload failed", error=str(e), error_type=type(e).__name__)
        raise HTTPException(status_code=500, detail="Failed to upload CV")

    return CVUploadResponse(message="CV uploaded successfully", cv=CVResponse.from_domain(document))


@router.get("", response_model=List[CVResponse], summary="List my CVs")
async def list_cvs(current_user: CurrentUserDep, cv_service: CVServiceDep):
    try:
        documents = await cv_service.list_for_user(current_user.user_id)
    except DomainException as domain_exc:
        raise map_domain_exception_to_http(domain_exc)
    except Exception as e:
        logger.error("Failed to list CVs", error=str(e))
        raise HTTPException(status_code=500, detail="Failed to fetch CVs")

    return [CVResponse.from_domain(document) for document in documents]


@router.get("/download/{cv_id}", response_class=Response, summary="Download a CV")
async def download_cv(
    current_user: CurrentUserDep,
    cv_service: CVServiceDep,
    cv_id: str = Path(..., description="CV identifier"),
):
    try:
        document, content = await cv_service.get_document(cv_id, current_user.user_id)
    except DomainException as domain_exc:
        raise map_domain_exception_to_http(domain_exc)
    except Exception as e:
        logger.error("CV download failed", cv_id=cv_id, error=str(e))
        raise HTTPException(status_code=500, detail="Failed to download CV")

    return Response(
        content=content,
        media_type=document.mimetype,
        headers={
            "Content-Disposition": f'attachment; filename="{document.download_filename()}"',
        },
    )


@router.delete("/delete/{cv_id}", response_model=MessageResponse, summary="Delete a CV")
async def delete_cv(
    current_user: CurrentUserDep,
    cv_service: CVServiceDep,
    cv_id: str = Path(..., description="CV identifier"),
):
    try:
        await cv_service.delete(cv_id, current_user.user_id)
    except DomainException as domain_exc:
        raise map_domain_exception_to_http(domain_exc)
    except Exception as e:
        logger.error("CV deletion failed", cv_id=cv_id, error=str(e))
        raise HTTPException(status_code=500, detail="Failed to delete CV")

    return MessageResponse(message="CV deleted successfully")
