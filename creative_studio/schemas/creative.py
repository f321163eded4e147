# creative_studio/schemas/creative.py
from datetime import datetime

from creative_studio.schemas.common import CamelModel
from creative_studio.schemas.generation import HeadlineOut, ImageOut


class CreativePairRequest(CamelModel):
    campaign_id: str
    headline_id: str
    image_id: str


class CreativeOut(CamelModel):
    id: str
    campaign_id: str
    headline_id: str
    image_id: str
    status: str
    created_at: datetime


class CreativeDetailOut(CreativeOut):
    headline: HeadlineOut
    image: ImageOut
