"""
Test fixtures for Creative Studio

In-memory SQLite per test, the FastAPI app driven through httpx, and a
scripted stand-in for the generation provider.
"""

import os

os.environ["DATABASE_URL"] = "sqlite+aiosqlite://"
os.environ["OPENAI_API_KEY"] = "test-key"

import asyncio
import pytest
import httpx
from typing import Optional
from sqlalchemy import select, func, text
from sqlalchemy.ext.asyncio import create_async_engine, async_sessionmaker, AsyncSession
from sqlalchemy.pool import StaticPool

from creative_studio.db.base import Base
from creative_studio.db.session import get_async_session
from creative_studio.llm_reasoner.openai_oracle import (
    OracleError,
    extract_completion_text,
    extract_image_url,
    get_oracle,
)
from creative_studio.main import app


# ====================
# Generation provider
# ====================


class FakeOracle:
    """Scripted provider: canned completion text, numbered image URLs.

    Setting `completion_body` or `image_body` feeds a raw provider response
    through the real extractors instead.
    """

    def __init__(self):
        self.completion = "Erste Schlagzeile\nZweite Schlagzeile\nDritte Schlagzeile"
        self.fail_completion = False
        self.completion_body = None
        self.image_body = None
        self.failing_image_calls = set()
        self.completion_calls = []
        self.image_calls = []
        self.in_flight = 0
        self.max_in_flight = 0

    async def complete(self, system_prompt: str, user_prompt: str, temperature: float) -> str:
        self.completion_calls.append(
            {"system_prompt": system_prompt, "user_prompt": user_prompt, "temperature": temperature}
        )
        if self.fail_completion:
            raise OracleError("provider unavailable")
        if self.completion_body is not None:
            return extract_completion_text(self.completion_body)
        return self.completion

    async def generate_image(self, prompt: str, size: str, quality: str) -> str:
        self.image_calls.append({"prompt": prompt, "size": size, "quality": quality})
        call_number = len(self.image_calls)
        self.in_flight += 1
        self.max_in_flight = max(self.max_in_flight, self.in_flight)
        try:
            await asyncio.sleep(0.01)
            if call_number in self.failing_image_calls:
                raise OracleError(f"image call {call_number} failed")
            if self.image_body is not None:
                return extract_image_url(self.image_body)
            return f"https://images.example.com/{call_number}.png"
        finally:
            self.in_flight -= 1


@pytest.fixture
def oracle():
    return FakeOracle()


# ====================
# Database
# ====================


@pytest.fixture
async def engine():
    engine = create_async_engine("sqlite+aiosqlite://", poolclass=StaticPool)
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    yield engine
    await engine.dispose()


@pytest.fixture
def session_factory(engine):
    return async_sessionmaker(bind=engine, expire_on_commit=False, class_=AsyncSession)


@pytest.fixture
async def session(session_factory):
    async with session_factory() as s:
        yield s


class DBHelper:
    """Direct store access for assertions"""

    def __init__(self, engine, session_factory):
        self.engine = engine
        self.session_factory = session_factory

    async def count(self, model, **filters) -> int:
        async with self.session_factory() as s:
            q = select(func.count()).select_from(model)
            for column, value in filters.items():
                q = q.where(getattr(model, column) == value)
            return await s.scalar(q)

    async def get(self, model, row_id: str):
        async with self.session_factory() as s:
            return await s.get(model, row_id)

    async def drop_table(self, table: str):
        async with self.engine.begin() as conn:
            await conn.execute(text(f"DROP TABLE {table}"))


@pytest.fixture
def db(engine, session_factory):
    return DBHelper(engine, session_factory)


# ====================
# HTTP Client
# ====================


@pytest.fixture
async def client(session_factory, oracle):
    async def override_session():
        async with session_factory() as s:
            yield s

    app.dependency_overrides[get_async_session] = override_session
    app.dependency_overrides[get_oracle] = lambda: oracle
    async with httpx.AsyncClient(transport=httpx.ASGITransport(app=app), base_url="http://test") as c:
        yield c
    app.dependency_overrides.clear()


# ====================
# API Response Helpers
# ====================


class APIResponseHelper:
    """Helper for validating API responses"""

    @staticmethod
    def assert_success(response: httpx.Response, expected_status: int = 200) -> dict:
        assert response.status_code == expected_status, (
            f"Expected {expected_status}, got {response.status_code}: {response.text}"
        )
        body = response.json()
        assert body["success"] is True
        return body.get("data", {})

    @staticmethod
    def assert_error(response: httpx.Response, expected_status: int, message: Optional[str] = None):
        assert response.status_code == expected_status, (
            f"Expected {expected_status}, got {response.status_code}: {response.text}"
        )
        body = response.json()
        assert body["success"] is False
        if message is not None:
            assert body["error"] == message


@pytest.fixture
def api_helper():
    return APIResponseHelper()


# ====================
# Factories
# ====================


CAMPAIGN_PAYLOAD = {
    "name": "Launch",
    "industry": "SaaS",
    "audience": "Founders",
    "tone": "exciting",
}


@pytest.fixture
def make_campaign(client, api_helper):
    async def _make(**overrides) -> dict:
        payload = {**CAMPAIGN_PAYLOAD, **overrides}
        response = await client.post("/api/campaigns", json=payload)
        return api_helper.assert_success(response)["campaign"]

    return _make


@pytest.fixture
def make_headlines(client, api_helper):
    async def _make(campaign: dict, count: int = 3) -> list:
        response = await client.post(
            "/api/ai/headlines/generate",
            json={
                "campaignId": campaign["id"],
                "count": count,
                "context": {k: campaign[k] for k in ("name", "industry", "audience", "tone")},
            },
        )
        return api_helper.assert_success(response)["headlines"]

    return _make


@pytest.fixture
def make_images(client, api_helper):
    async def _make(campaign: dict, count: int = 2) -> list:
        response = await client.post(
            "/api/ai/images/generate",
            json={"campaignId": campaign["id"], "count": count},
        )
        return api_helper.assert_success(response)["images"]

    return _make
