# creative_studio/routers/campaigns.py
"""
Campaign creation and listing
"""

from fastapi import APIRouter, Depends
from sqlalchemy.ext.asyncio import AsyncSession

from creative_studio.core.config import settings
from creative_studio.db.session import get_async_session
from creative_studio.schemas.campaign import CampaignCreateRequest, CampaignOut, CampaignDetailOut
from creative_studio.schemas.common import envelope
from creative_studio.services.campaign_service import campaign_service

router = APIRouter(prefix=f"{settings.API_PREFIX}/campaigns", tags=["Campaigns"])


@router.post("")
async def create_campaign(
    request: CampaignCreateRequest,
    session: AsyncSession = Depends(get_async_session),
):
    campaign = await campaign_service.create_campaign(session, request)
    return envelope(campaign=CampaignOut.model_validate(campaign).to_json())


@router.get("")
async def list_campaigns(session: AsyncSession = Depends(get_async_session)):
    """All campaigns, newest first, with headlines, images and creatives"""
    campaigns = await campaign_service.list_campaigns(session)
    return envelope(campaigns=[CampaignDetailOut.model_validate(c).to_json() for c in campaigns])
