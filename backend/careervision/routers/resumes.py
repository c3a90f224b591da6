"""
Resumes Router - upload, status polling and deletion of resume documents.
"""
import logging
from typing import List

from fastapi import APIRouter, Depends, File, HTTPException, Request, UploadFile, status
from sqlalchemy import delete, select
from sqlalchemy.ext.asyncio import AsyncSession

from ..config import get_settings
from ..database import get_db
from ..models import Milestone, ResumeDocument, ResumeProcessingStatus, User
from ..schemas.resume import ResumeDetailResponse, ResumeSummaryResponse, ResumeUploadResponse
from ..services.auth import get_current_user
from ..services.storage import delete_upload, save_upload

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/resumes", tags=["Resumes"])


async def get_user_document(db: AsyncSession, user_id: int, resume_id: int) -> ResumeDocument:
    result = await db.execute(
        select(ResumeDocument).where(
            ResumeDocument.id == resume_id,
            ResumeDocument.user_id == user_id
        )
    )
    document = result.scalar_one_or_none()
    if not document:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail="Resume not found"
        )
    return document


@router.post("/upload", response_model=ResumeUploadResponse, status_code=status.HTTP_202_ACCEPTED)
async def upload_resume(
    request: Request,
    file: UploadFile = File(...),
    db: AsyncSession = Depends(get_db),
    current_user: User = Depends(get_current_user)
):
    """
    Save the uploaded file, record a pending document and hand it to the
    background processor. The response returns before parsing starts;
    poll GET /api/resumes/{id} for the outcome.
    """
    settings = get_settings()

    if not file.filename:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail="No file uploaded"
        )

    mime_type = (file.content_type or "").split(";")[0].strip().lower()
    if mime_type not in settings.get_allowed_mime_types():
        raise HTTPException(
            status_code=status.HTTP_415_UNSUPPORTED_MEDIA_TYPE,
            detail="Only PDF, DOC and DOCX files are supported"
        )

    data = await file.read()
    if not data:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail="Uploaded file is empty"
        )
    if len(data) > settings.max_upload_size:
        raise HTTPException(
            status_code=status.HTTP_413_REQUEST_ENTITY_TOO_LARGE,
            detail=f"File size must be less than {settings.max_upload_size // (1024 * 1024)}MB"
        )

    filename, path = await save_upload(settings.upload_dir, current_user.id, file.filename, data)

    try:
        document = ResumeDocument(
            user_id=current_user.id,
            filename=filename,
            original_name=file.filename[:255],
            file_path=path,
            file_size=len(data),
            mime_type=mime_type,
            status=ResumeProcessingStatus.PENDING
        )
        db.add(document)
        await db.commit()
        await db.refresh(document)
    except Exception:
        # Don't leave an orphaned file behind
        await delete_upload(path)
        raise

    request.app.state.resume_queue.submit(document.id)
    logger.info("Resume %s uploaded by user %s, processing queued", document.id, current_user.id)

    return ResumeUploadResponse(resume_id=document.id, filename=filename)


@router.get("", response_model=List[ResumeSummaryResponse])
async def list_resumes(
    db: AsyncSession = Depends(get_db),
    current_user: User = Depends(get_current_user)
):
    """All resume documents of the current user, newest first."""
    result = await db.execute(
        select(ResumeDocument)
        .where(ResumeDocument.user_id == current_user.id)
        .order_by(ResumeDocument.created_at.desc(), ResumeDocument.id.desc())
    )
    return result.scalars().all()


@router.get("/{resume_id}", response_model=ResumeDetailResponse)
async def get_resume(
    resume_id: int,
    db: AsyncSession = Depends(get_db),
    current_user: User = Depends(get_current_user)
):
    return await get_user_document(db, current_user.id, resume_id)


@router.delete("/{resume_id}")
async def delete_resume(
    resume_id: int,
    db: AsyncSession = Depends(get_db),
    current_user: User = Depends(get_current_user)
):
    """Delete a resume document, its stored file and the milestones extracted from it."""
    document = await get_user_document(db, current_user.id, resume_id)

    # Explicit delete; SQLite only honours ON DELETE CASCADE with foreign keys enabled
    result = await db.execute(
        delete(Milestone).where(Milestone.source_document_id == document.id)
    )
    file_path = document.file_path
    await db.delete(document)
    await db.commit()

    await delete_upload(file_path)
    logger.info("Resume %s deleted with %s milestones", resume_id, result.rowcount)

    return {"message": "Resume deleted", "milestones_deleted": result.rowcount}
