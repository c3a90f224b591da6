from sqlalchemy.ext.asyncio import create_async_engine, AsyncSession, async_sessionmaker
from sqlalchemy.orm import declarative_base
from .config import get_settings

settings = get_settings()

# Pool tuning and PgBouncer flags only apply to PostgreSQL;
# SQLite doesn't support these parameters
engine_kwargs = {"echo": settings.debug, "pool_pre_ping": True}
if "postgresql" in settings.database_url:
    engine_kwargs.update(
        connect_args={
            "statement_cache_size": 0,
            "prepared_statement_cache_size": 0,
        },
        pool_recycle=300,    # Recycle connections every 5 minutes
        pool_size=20,
        max_overflow=30,
    )

engine = create_async_engine(settings.database_url, **engine_kwargs)
async_session_maker = async_sessionmaker(engine, class_=AsyncSession, expire_on_commit=False)

Base = declarative_base()


async def get_db():
    async with async_session_maker() as session:
        try:
            yield session
            await session.commit()
        except Exception:
            await session.rollback()
            raise
        finally:
            await session.close()


async def init_db(bind=None):
    """Create all tables on the given engine (defaults to the app engine)."""
    # Import models so every table is registered on Base.metadata
    from . import models  # noqa: F401

    async with (bind or engine).begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
