# creative_studio/routers/generation.py
"""
AI headline and image generation
"""

from fastapi import APIRouter, Depends, Query
from sqlalchemy.ext.asyncio import AsyncSession
from typing import Optional
import logging

from creative_studio.core.config import settings
from creative_studio.db.session import get_async_session
from creative_studio.llm_reasoner.openai_oracle import GenerationOracle, get_oracle
from creative_studio.schemas.common import envelope
from creative_studio.schemas.generation import (
    HeadlineGenerateRequest,
    ImageGenerateRequest,
    GeneratedHeadlineOut,
    GeneratedImageOut,
    HeadlineOut,
    ImageOut,
)
from creative_studio.services.headline_service import headline_service
from creative_studio.services.image_service import image_service

router = APIRouter(prefix=f"{settings.API_PREFIX}/ai", tags=["Generation"])
logger = logging.getLogger(__name__)

# =====================================================
# ✍️ HEADLINES
# =====================================================

@router.post("/headlines/generate")
async def generate_headlines(
    request: HeadlineGenerateRequest,
    session: AsyncSession = Depends(get_async_session),
    oracle: GenerationOracle = Depends(get_oracle),
):
    headlines = await headline_service.generate_headlines(
        session, oracle, request.campaign_id, request.count, request.context
    )
    return envelope(headlines=[GeneratedHeadlineOut.model_validate(h).to_json() for h in headlines])


@router.get("/headlines/generate")
async def list_headlines(
    campaign_id: Optional[str] = Query(None, alias="campaignId"),
    session: AsyncSession = Depends(get_async_session),
):
    listing = await headline_service.list_headlines(session, campaign_id)
    if not listing.available:
        # Keep the listing contract: an unreachable store reads as "no headlines".
        logger.warning(f"Headline store unavailable for campaign {campaign_id}; returning empty list")
    return envelope(
        headlines=[HeadlineOut.model_validate(h).to_json() for h in listing.items],
        available=listing.available,
    )

# =====================================================
# 🎨 IMAGES
# =====================================================

@router.post("/images/generate")
async def generate_images(
    request: ImageGenerateRequest,
    session: AsyncSession = Depends(get_async_session),
    oracle: GenerationOracle = Depends(get_oracle),
):
    images = await image_service.generate_images(
        session, oracle, request.campaign_id, request.count, request.context
    )
    return envelope(images=[GeneratedImageOut.model_validate(img).to_json() for img in images])


@router.get("/images/generate")
async def list_images(
    campaign_id: Optional[str] = Query(None, alias="campaignId"),
    session: AsyncSession = Depends(get_async_session),
):
    listing = await image_service.list_images(session, campaign_id)
    if not listing.available:
        logger.warning(f"Image store unavailable for campaign {campaign_id}; returning empty list")
    return envelope(
        images=[ImageOut.model_validate(img).to_json() for img in listing.items],
        available=listing.available,
    )
