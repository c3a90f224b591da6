from careervision.models import ResumeDocument, ResumeProcessingStatus


async def create_document(db, user, tmp_path, data, mime_type="application/msword"):
    path = tmp_path / "resume.bin"
    path.write_bytes(data)
    document = ResumeDocument(
        user_id=user.id, filename="resume.bin", original_name="resume.doc",
        file_path=str(path), file_size=len(data), mime_type=mime_type
    )
    db.add(document)
    await db.commit()
    await db.refresh(document)
    return document.id


async def load(session_maker, document_id):
    async with session_maker() as session:
        return await session.get(ResumeDocument, document_id)


async def test_resume_is_processed(db, user, tmp_path, session_maker, resume_queue, sample_resume_text):
    document_id = await create_document(db, user, tmp_path, sample_resume_text.encode())

    status = await resume_queue.process_resume(document_id)
    assert status == ResumeProcessingStatus.COMPLETED

    document = await load(session_maker, document_id)
    assert document.status == ResumeProcessingStatus.COMPLETED
    assert document.milestones_created == 7
    assert document.error_message is None
    assert document.started_at is not None
    assert document.completed_at is not None
    assert "Acme Corp" in document.extracted_text
    assert document.extracted_data["personal_info"]["email"] == "jane.doe@example.com"
    assert document.extracted_data["experience"][0]["start_date"] == "2019-01-01"


async def test_corrupt_pdf_marks_document_failed(db, user, tmp_path, session_maker, resume_queue):
    document_id = await create_document(db, user, tmp_path, b"not really a pdf", "application/pdf")

    status = await resume_queue.process_resume(document_id)
    assert status == ResumeProcessingStatus.FAILED

    document = await load(session_maker, document_id)
    assert document.error_message.startswith("Could not open PDF")
    assert document.milestones_created == 0


async def test_missing_file_marks_document_failed(db, user, tmp_path, session_maker, resume_queue):
    document_id = await create_document(db, user, tmp_path, b"Jane Doe")
    (tmp_path / "resume.bin").unlink()

    assert await resume_queue.process_resume(document_id) == ResumeProcessingStatus.FAILED
    document = await load(session_maker, document_id)
    assert document.error_message.startswith("Processing error:")


async def test_unknown_document(resume_queue, engine):
    assert await resume_queue.process_resume(12345) is None


async def test_submitted_tasks_can_be_joined(db, user, tmp_path, session_maker, resume_queue, sample_resume_text):
    document_id = await create_document(db, user, tmp_path, sample_resume_text.encode())

    task = resume_queue.submit(document_id)
    assert resume_queue.pending == 1
    await resume_queue.join()

    assert task.done()
    assert resume_queue.pending == 0
    document = await load(session_maker, document_id)
    assert document.status == ResumeProcessingStatus.COMPLETED
