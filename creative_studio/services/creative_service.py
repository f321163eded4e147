# creative_studio/services/creative_service.py
"""
Service for pairing headlines with images
"""

from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.exc import SQLAlchemyError, IntegrityError
from typing import List, Optional
import logging

from creative_studio import crud
from creative_studio.core.errors import ValidationError, NotFoundError, ConflictError, StoreError
from creative_studio.db.models.creative import Creative

logger = logging.getLogger(__name__)


class CreativeService:
    """Create, list and remove creative pairs"""

    async def create_pair(
        self,
        session: AsyncSession,
        campaign_id: str,
        headline_id: str,
        image_id: str,
    ) -> Creative:
        """
        Pair a headline with an image.

        Lookups run one after another (campaign, headline, image) and the
        first missing entity is reported.

        Raises:
            NotFoundError: campaign, headline or image missing
            ConflictError: the same triple is already paired
        """
        if not await crud.get_campaign(session, campaign_id):
            raise NotFoundError("Campaign not found")
        if not await crud.get_headline(session, headline_id):
            raise NotFoundError("Headline not found")
        if not await crud.get_image(session, image_id):
            raise NotFoundError("Image not found")

        if await crud.find_creative(session, campaign_id, headline_id, image_id):
            raise ConflictError("Creative pair already exists")

        try:
            creative = await crud.create_creative(session, campaign_id, headline_id, image_id)
            await session.commit()
        except IntegrityError as e:
            # Lost a race with a concurrent identical insert.
            await session.rollback()
            logger.warning(f"Duplicate creative rejected by constraint: {e}")
            raise ConflictError("Creative pair already exists") from e
        except SQLAlchemyError as e:
            await session.rollback()
            logger.error(f"❌ Creative pairing failed: {e}")
            raise StoreError("Failed to create creative pair") from e

        logger.info(f"✅ Creative {creative.id} paired headline {headline_id} with image {image_id}")
        return creative

    async def list_pairs(self, session: AsyncSession, campaign_id: Optional[str]) -> List[Creative]:
        if not campaign_id:
            raise ValidationError("campaignId is required")
        try:
            return await crud.list_active_creatives(session, campaign_id)
        except SQLAlchemyError as e:
            logger.error(f"Failed to fetch creatives: {e}")
            raise StoreError("Failed to fetch creatives") from e

    async def delete_pair(self, session: AsyncSession, creative_id: Optional[str]) -> None:
        if not creative_id:
            raise ValidationError("Creative ID is required")

        creative = await crud.get_creative(session, creative_id)
        if not creative:
            raise NotFoundError("Creative not found")

        try:
            await crud.delete_creative(session, creative_id)
            await session.commit()
        except SQLAlchemyError as e:
            await session.rollback()
            logger.error(f"❌ Creative deletion failed: {e}")
            raise StoreError("Failed to delete creative") from e

        logger.info(f"🗑️ Creative {creative_id} removed")


# Global instance
creative_service = CreativeService()
