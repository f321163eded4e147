# creative_studio/services/image_service.py
"""
Service for AI image generation
"""

from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.exc import SQLAlchemyError
from typing import Dict, List, Optional
import asyncio
import logging

from creative_studio import crud
from creative_studio.core.config import settings
from creative_studio.core.errors import ValidationError, NotFoundError, GenerationError, StoreError
from creative_studio.core.models import Listing
from creative_studio.db.models.campaign import Campaign
from creative_studio.db.models.image import Image
from creative_studio.llm_reasoner.openai_oracle import GenerationOracle, OracleError
from creative_studio.schemas.generation import ImageContext

logger = logging.getLogger(__name__)


class ImageService:
    """Generate, persist and list campaign images"""

    def __init__(self, size: Optional[str] = None, quality: Optional[str] = None):
        self.size = size or settings.IMAGE_SIZE
        self.quality = quality or settings.IMAGE_QUALITY

    @staticmethod
    def resolve_context(campaign: Campaign, context: Optional[ImageContext]) -> Dict[str, Optional[str]]:
        """Fill every absent or empty context field from the stored campaign."""
        context = context or ImageContext()
        return {
            field: getattr(context, field) or getattr(campaign, field)
            for field in ("industry", "audience", "tone", "description")
        }

    @staticmethod
    def build_prompt(resolved: Dict[str, Optional[str]]) -> str:
        description = f"- Description: {resolved['description']}\n" if resolved.get("description") else ""
        return (
            f"Create a professional marketing image for:\n"
            f"- Industry: {resolved['industry']}\n"
            f"- Target Audience: {resolved['audience']}\n"
            f"- Tone: {resolved['tone']}\n"
            f"{description}\n"
            f"The image should be brand-safe, professional, visually appealing, "
            f"and suitable for marketing purposes."
        )

    async def generate_images(
        self,
        session: AsyncSession,
        oracle: GenerationOracle,
        campaign_id: str,
        count: int,
        context: Optional[ImageContext] = None,
    ) -> List[Image]:
        """
        Generate ``count`` images concurrently and store them in one transaction.

        All or nothing: if any single provider call fails, nothing is stored.
        Sibling calls already in flight are left to finish; their results
        are discarded.
        """
        campaign = await crud.get_campaign(session, campaign_id)
        if not campaign:
            raise NotFoundError("Campaign not found")

        prompt = self.build_prompt(self.resolve_context(campaign, context))

        logger.info(f"🎨 Generating {count} images for campaign {campaign_id}")
        try:
            urls = await asyncio.gather(
                *(oracle.generate_image(prompt, self.size, self.quality) for _ in range(count))
            )
        except OracleError as e:
            logger.error(f"❌ Image generation failed for campaign {campaign_id}: {e}")
            raise GenerationError("Failed to generate images") from e

        try:
            images = await crud.create_images(
                session,
                campaign_id,
                [{"image_url": url, "prompt": prompt} for url in urls],
            )
            await session.commit()
        except SQLAlchemyError as e:
            await session.rollback()
            logger.error(f"❌ Failed to store images for campaign {campaign_id}: {e}")
            raise StoreError("Failed to generate images") from e

        logger.info(f"✅ Stored {len(images)} images for campaign {campaign_id}")
        return images

    async def list_images(self, session: AsyncSession, campaign_id: Optional[str]) -> Listing:
        if not campaign_id:
            raise ValidationError("campaignId is required")
        try:
            return Listing(items=await crud.list_active_images(session, campaign_id))
        except SQLAlchemyError as e:
            logger.error(f"Database error fetching images: {e}")
            return Listing.unavailable()


# Global instance
image_service = ImageService()
