import pytest
from httpx import ASGITransport, AsyncClient
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker, create_async_engine

from careervision.config import get_settings
from careervision.database import get_db, init_db
from careervision.main import app
from careervision.models import User
from careervision.services.intent_classifier import NearestNeighbourIntentClassifier
from careervision.services.resume_processing import ResumeProcessingQueue


@pytest.fixture
async def engine(tmp_path):
    # File-backed so the background task and the request get separate connections
    engine = create_async_engine(f"sqlite+aiosqlite:///{tmp_path / 'test.db'}")
    await init_db(engine)
    yield engine
    await engine.dispose()


@pytest.fixture
def session_maker(engine):
    return async_sessionmaker(engine, class_=AsyncSession, expire_on_commit=False)


@pytest.fixture
async def db(session_maker):
    async with session_maker() as session:
        yield session


@pytest.fixture
async def user(db):
    user = User(email="jane.doe@example.com", name="Jane Doe")
    db.add(user)
    await db.commit()
    await db.refresh(user)
    return user


@pytest.fixture
def upload_dir(tmp_path, monkeypatch):
    path = tmp_path / "uploads"
    monkeypatch.setattr(get_settings(), "upload_dir", str(path))
    return path


@pytest.fixture(scope="session")
def intent_classifier():
    return NearestNeighbourIntentClassifier()


@pytest.fixture
def resume_queue(session_maker):
    return ResumeProcessingQueue(session_maker)


@pytest.fixture
async def client(session_maker, upload_dir, intent_classifier, resume_queue):
    async def override_get_db():
        async with session_maker() as session:
            try:
                yield session
                await session.commit()
            except Exception:
                await session.rollback()
                raise

    app.dependency_overrides[get_db] = override_get_db
    app.state.intent_classifier = intent_classifier
    app.state.resume_queue = resume_queue

    async with AsyncClient(transport=ASGITransport(app=app), base_url="http://test") as ac:
        yield ac

    await resume_queue.join()
    app.dependency_overrides.clear()


@pytest.fixture
def auth_headers(user):
    return {"X-User-Id": str(user.id)}


SAMPLE_RESUME = """Jane Doe
jane.doe@example.com
(555) 123-4567
Austin, TX

Summary
Backend engineer who builds reliable Python services for growing teams.

Experience
Senior Software Engineer
Engineering | Acme Corp | Jan 2019 - Dec 2021
Built Python and Django services on AWS with Docker.
Led a team of five engineers.
Software Engineer
Platform | Globex | 2016 - 2018
Maintained Java and MySQL reporting pipelines.

Education
Bachelor of Science in Computer Science
University of Texas
2012 - 2016
GPA: 3.8

Certifications
AWS Certified Solutions Architect
Amazon Web Services 2020

Projects
Timeline Visualizer
Interactive career timeline built with React and TypeScript for recruiters.

Skills
Python, Django, AWS, Docker, Git, Leadership
"""


@pytest.fixture
def sample_resume_text():
    return SAMPLE_RESUME
