# creative_studio/services/campaign_service.py
"""
Service for creating and listing campaigns
"""

from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.exc import SQLAlchemyError
from typing import List
import logging

from creative_studio import crud
from creative_studio.core.errors import StoreError
from creative_studio.db.models.campaign import Campaign
from creative_studio.schemas.campaign import CampaignCreateRequest

logger = logging.getLogger(__name__)


class CampaignService:
    """Campaign root aggregate operations"""

    async def create_campaign(self, session: AsyncSession, request: CampaignCreateRequest) -> Campaign:
        """
        Persist a validated campaign.

        Field validation (non-empty name/industry/audience, tone enum) happens
        in CampaignCreateRequest before this is called.
        """
        try:
            campaign = await crud.create_campaign(session, request.model_dump(mode="json"))
            await session.commit()
        except SQLAlchemyError as e:
            await session.rollback()
            logger.error(f"❌ Campaign creation failed: {e}")
            raise StoreError("Failed to create campaign") from e

        logger.info(f"✅ Campaign created: {campaign.id} ({campaign.name})")
        return campaign

    async def list_campaigns(self, session: AsyncSession) -> List[Campaign]:
        try:
            return await crud.list_campaigns_with_content(session)
        except SQLAlchemyError as e:
            logger.error(f"❌ Failed to fetch campaigns: {e}")
            raise StoreError("Failed to fetch campaigns") from e


# Global instance
campaign_service = CampaignService()
