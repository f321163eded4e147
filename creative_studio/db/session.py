# creative_studio/db/session.py
from sqlalchemy.ext.asyncio import create_async_engine, AsyncSession, async_sessionmaker
from creative_studio.core.config import settings
from creative_studio.db.base import Base

# One engine per process; every request borrows a session from its pool.
engine = create_async_engine(settings.DATABASE_URL, future=True, echo=False)

# async session maker
AsyncSessionLocal = async_sessionmaker(bind=engine, expire_on_commit=False, class_=AsyncSession)


# Dependency for FastAPI: use get_async_session in endpoints with Depends(...)
async def get_async_session():
    async with AsyncSessionLocal() as session:
        yield session


async def create_tables():
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)


async def dispose_engine():
    await engine.dispose()
