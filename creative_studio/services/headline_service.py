# creative_studio/services/headline_service.py
"""
Service for AI headline generation
"""

from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.exc import SQLAlchemyError
from typing import List, Optional
import logging

from creative_studio import crud
from creative_studio.core.config import settings
from creative_studio.core.errors import ValidationError, NotFoundError, GenerationError, StoreError
from creative_studio.core.models import Listing
from creative_studio.db.models.headline import Headline
from creative_studio.llm_reasoner.openai_oracle import GenerationOracle, OracleError
from creative_studio.schemas.generation import HeadlineContext

logger = logging.getLogger(__name__)


class HeadlineService:
    """Generate, persist and list campaign headlines"""

    def __init__(self, language: Optional[str] = None, temperature: Optional[float] = None):
        self.language = language or settings.HEADLINE_LANGUAGE
        self.temperature = temperature if temperature is not None else settings.HEADLINE_TEMPERATURE

    @property
    def system_prompt(self) -> str:
        return f"You are a professional {self.language} marketing copywriter. Generate compelling headlines."

    def build_prompt(self, count: int, context: HeadlineContext) -> str:
        description = f"- Description: {context.description}\n" if context.description else ""
        return (
            f"Generate {count} {self.language} marketing headlines for a campaign.\n\n"
            f"Campaign Details:\n"
            f"- Name: {context.name}\n"
            f"- Industry: {context.industry}\n"
            f"- Target Audience: {context.audience}\n"
            f"- Tone: {context.tone}\n"
            f"{description}\n"
            f"Requirements:\n"
            f"- Each headline should be 8-15 words\n"
            f"- Action-oriented and benefit-focused\n"
            f"- Written in {self.language}\n"
            f"- Suitable for the {context.industry} industry\n"
            f"- Match the {context.tone} tone\n\n"
            f"Return ONLY the headlines, one per line, without numbering or bullet points."
        )

    @staticmethod
    def parse_headlines(text: str, count: int) -> List[str]:
        """One headline per non-empty line, at most ``count``."""
        lines = [line.strip() for line in text.splitlines()]
        return [line for line in lines if line][:count]

    async def generate_headlines(
        self,
        session: AsyncSession,
        oracle: GenerationOracle,
        campaign_id: str,
        count: int,
        context: HeadlineContext,
    ) -> List[Headline]:
        """
        Generate up to ``count`` headlines and store them in one transaction.

        The provider may return fewer lines than asked for; that is accepted.

        Raises:
            NotFoundError: campaign does not exist
            GenerationError: provider failed or returned no usable lines
            StoreError: the batch could not be persisted
        """
        campaign = await crud.get_campaign(session, campaign_id)
        if not campaign:
            raise NotFoundError("Campaign not found")

        logger.info(f"🎯 Generating {count} headlines for campaign {campaign_id}")
        try:
            text = await oracle.complete(self.system_prompt, self.build_prompt(count, context), self.temperature)
        except OracleError as e:
            logger.error(f"❌ Headline generation failed for campaign {campaign_id}: {e}")
            raise GenerationError("Failed to generate headlines") from e

        texts = self.parse_headlines(text, count)
        if not texts:
            logger.error(f"❌ Provider returned no usable headlines for campaign {campaign_id}")
            raise GenerationError("Failed to generate headlines")
        if len(texts) < count:
            logger.info(f"Provider returned {len(texts)}/{count} headlines for campaign {campaign_id}")

        try:
            headlines = await crud.create_headlines(session, campaign_id, texts)
            await session.commit()
        except SQLAlchemyError as e:
            await session.rollback()
            logger.error(f"❌ Failed to store headlines for campaign {campaign_id}: {e}")
            raise StoreError("Failed to generate headlines") from e

        logger.info(f"✅ Stored {len(headlines)} headlines for campaign {campaign_id}")
        return headlines

    async def list_headlines(self, session: AsyncSession, campaign_id: Optional[str]) -> Listing:
        if not campaign_id:
            raise ValidationError("campaignId is required")
        try:
            return Listing(items=await crud.list_active_headlines(session, campaign_id))
        except SQLAlchemyError as e:
            logger.error(f"Database error fetching headlines: {e}")
            return Listing.unavailable()


# Global instance
headline_service = HeadlineService()
