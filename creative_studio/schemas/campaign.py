# creative_studio/schemas/campaign.py
"""
Schemas for campaign creation and listing
"""

from pydantic import Field, field_validator
from typing import List, Optional
from datetime import datetime

from creative_studio.core.models import Tone
from creative_studio.schemas.common import CamelModel
from creative_studio.schemas.generation import HeadlineOut, ImageOut
from creative_studio.schemas.creative import CreativeDetailOut


class CampaignCreateRequest(CamelModel):
    """Request model for creating a new campaign"""

    name: str
    industry: str
    audience: str
    tone: Tone
    description: Optional[str] = None

    @field_validator("name")
    @classmethod
    def name_required(cls, v):
        if not v.strip():
            raise ValueError("Name is required")
        return v

    @field_validator("industry")
    @classmethod
    def industry_required(cls, v):
        if not v.strip():
            raise ValueError("Industry is required")
        return v

    @field_validator("audience")
    @classmethod
    def audience_required(cls, v):
        if not v.strip():
            raise ValueError("Target audience is required")
        return v


class CampaignOut(CamelModel):
    id: str
    name: str
    industry: str
    audience: str
    tone: str
    description: Optional[str] = None
    created_at: datetime


class CampaignDetailOut(CampaignOut):
    """Campaign with everything generated for it"""

    headlines: List[HeadlineOut] = Field(default_factory=list)
    images: List[ImageOut] = Field(default_factory=list)
    creatives: List[CreativeDetailOut] = Field(default_factory=list)
