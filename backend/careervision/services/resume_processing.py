"""
Background resume processing.

Each upload is handed to ResumeProcessingQueue.submit() exactly once; the
HTTP request returns immediately and the task writes its terminal status
(completed / failed) back to the ResumeDocument. Tasks are tracked so the
app can drain them on shutdown and tests can await them.
"""
import asyncio
import logging
from datetime import datetime, timezone
from typing import Optional, Set

from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker

from ..models import ResumeDocument, ResumeProcessingStatus
from .milestone_materializer import materialize_milestones
from .resume_parser import parse_resume
from .storage import read_upload
from .text_extractor import TextExtractionError, extract_text, media_type_for_mime

logger = logging.getLogger(__name__)

ERROR_MESSAGE_MAX_LEN = 500


class ResumeProcessingQueue:
    """Spawns and tracks one processing task per uploaded resume."""

    def __init__(self, session_maker: async_sessionmaker):
        self.session_maker = session_maker
        self._tasks: Set[asyncio.Task] = set()

    @property
    def pending(self) -> int:
        return len(self._tasks)

    def submit(self, document_id: int) -> asyncio.Task:
        task = asyncio.create_task(
            self.process_resume(document_id),
            name=f"resume-processing-{document_id}"
        )
        self._tasks.add(task)
        task.add_done_callback(self._tasks.discard)
        return task

    async def join(self) -> None:
        """Wait for every in-flight task to finish."""
        while self._tasks:
            await asyncio.gather(*list(self._tasks), return_exceptions=True)

    async def process_resume(self, document_id: int) -> Optional[ResumeProcessingStatus]:
        """
        Extract, parse and materialize one resume document.

        Never raises: any failure is recorded on the document as `failed`
        with a human-readable message.
        """
        async with self.session_maker() as db:
            document = await db.get(ResumeDocument, document_id)
            if document is None:
                logger.warning("Resume document %s vanished before processing", document_id)
                return None

            document.status = ResumeProcessingStatus.PROCESSING
            document.started_at = datetime.now(timezone.utc)
            await db.commit()

            try:
                await self._run_pipeline(db, document)
            except TextExtractionError as e:
                logger.warning("Resume %s extraction failed: %s", document_id, e)
                await self._mark_failed(db, document_id, str(e))
            except Exception as e:
                logger.exception("Resume %s processing error: %s", document_id, e)
                await self._mark_failed(db, document_id, f"Processing error: {e}")

            document = await db.get(ResumeDocument, document_id)
            return document.status if document else None

    async def _run_pipeline(self, db: AsyncSession, document: ResumeDocument) -> None:
        media_type = media_type_for_mime(document.mime_type) or document.mime_type
        data = await read_upload(document.file_path)

        # PDF/DOCX decoding is CPU bound; keep it off the event loop
        text = await asyncio.to_thread(extract_text, data, media_type)
        profile = parse_resume(text)

        async with self.session_maker() as milestone_db:
            result = await materialize_milestones(milestone_db, profile, document.user_id, document.id)

        document.extracted_text = text
        document.extracted_data = profile.model_dump(mode="json")
        document.milestones_created = result.created
        document.status = ResumeProcessingStatus.COMPLETED
        document.error_message = None
        document.completed_at = datetime.now(timezone.utc)
        await db.commit()
        logger.info(
            "Resume %s processed for user %s: %d milestones",
            document.id, document.user_id, result.created
        )

    async def _mark_failed(self, db: AsyncSession, document_id: int, message: str) -> None:
        await db.rollback()
        document = await db.get(ResumeDocument, document_id)
        if document is None:
            return
        document.status = ResumeProcessingStatus.FAILED
        document.error_message = message[:ERROR_MESSAGE_MAX_LEN]
        document.completed_at = datetime.now(timezone.utc)
        await db.commit()
