# creative_studio/schemas/generation.py
"""
Schemas for AI headline and image generation
"""

from pydantic import Field
from typing import Optional
from datetime import datetime

from creative_studio.schemas.common import CamelModel

MIN_BATCH = 1
MAX_BATCH = 5


class HeadlineContext(CamelModel):
    name: str
    industry: str
    audience: str
    tone: str
    description: Optional[str] = None


class HeadlineGenerateRequest(CamelModel):
    campaign_id: str
    count: int = Field(..., ge=MIN_BATCH, le=MAX_BATCH)
    context: HeadlineContext


class ImageContext(CamelModel):
    """Every field is optional; missing ones fall back to the campaign."""

    name: Optional[str] = None
    industry: Optional[str] = None
    audience: Optional[str] = None
    tone: Optional[str] = None
    description: Optional[str] = None


class ImageGenerateRequest(CamelModel):
    campaign_id: str
    count: int = Field(..., ge=MIN_BATCH, le=MAX_BATCH)
    context: Optional[ImageContext] = None


class GeneratedHeadlineOut(CamelModel):
    id: str
    text: str


class GeneratedImageOut(CamelModel):
    id: str
    image_url: str
    prompt: str


class HeadlineOut(GeneratedHeadlineOut):
    campaign_id: str
    status: str
    created_at: datetime


class ImageOut(GeneratedImageOut):
    campaign_id: str
    status: str
    created_at: datetime
