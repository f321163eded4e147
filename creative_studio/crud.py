# creative_studio/crud.py
from typing import Dict, Any, List, Optional
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy import select, delete
from sqlalchemy.orm import selectinload

from creative_studio.core.models import RecordStatus
from creative_studio.db.models.campaign import Campaign
from creative_studio.db.models.headline import Headline
from creative_studio.db.models.image import Image
from creative_studio.db.models.creative import Creative

# Nothing in here commits: the calling service owns the transaction.


# -------------------------------
# Campaigns
# -------------------------------
async def create_campaign(session: AsyncSession, data: Dict[str, Any]) -> Campaign:
    campaign = Campaign(
        name=data["name"],
        industry=data["industry"],
        audience=data["audience"],
        tone=data["tone"],
        description=data.get("description"),
    )
    session.add(campaign)
    await session.flush()
    await session.refresh(campaign)
    return campaign


async def get_campaign(session: AsyncSession, campaign_id: str) -> Optional[Campaign]:
    return await session.get(Campaign, campaign_id)


async def list_campaigns_with_content(session: AsyncSession) -> List[Campaign]:
    q = (
        select(Campaign)
        .options(
            selectinload(Campaign.headlines),
            selectinload(Campaign.images),
            selectinload(Campaign.creatives).selectinload(Creative.headline),
            selectinload(Campaign.creatives).selectinload(Creative.image),
        )
        .order_by(Campaign.created_at.desc())
    )
    res = await session.execute(q)
    return list(res.scalars().all())


# -------------------------------
# Headlines
# -------------------------------
async def create_headlines(session: AsyncSession, campaign_id: str, texts: List[str]) -> List[Headline]:
    headlines = [Headline(text=text, campaign_id=campaign_id) for text in texts]
    session.add_all(headlines)
    await session.flush()
    return headlines


async def get_headline(session: AsyncSession, headline_id: str) -> Optional[Headline]:
    return await session.get(Headline, headline_id)


async def list_active_headlines(session: AsyncSession, campaign_id: str) -> List[Headline]:
    q = (
        select(Headline)
        .where(Headline.campaign_id == campaign_id, Headline.status == RecordStatus.ACTIVE.value)
        .order_by(Headline.created_at.desc())
    )
    res = await session.execute(q)
    return list(res.scalars().all())


# -------------------------------
# Images
# -------------------------------
async def create_images(session: AsyncSession, campaign_id: str, images: List[Dict[str, str]]) -> List[Image]:
    rows = [
        Image(image_url=img["image_url"], prompt=img["prompt"], campaign_id=campaign_id)
        for img in images
    ]
    session.add_all(rows)
    await session.flush()
    return rows


async def get_image(session: AsyncSession, image_id: str) -> Optional[Image]:
    return await session.get(Image, image_id)


async def list_active_images(session: AsyncSession, campaign_id: str) -> List[Image]:
    q = (
        select(Image)
        .where(Image.campaign_id == campaign_id, Image.status == RecordStatus.ACTIVE.value)
        .order_by(Image.created_at.desc())
    )
    res = await session.execute(q)
    return list(res.scalars().all())


# -------------------------------
# Creatives
# -------------------------------
async def find_creative(session: AsyncSession, campaign_id: str, headline_id: str, image_id: str) -> Optional[Creative]:
    q = select(Creative).where(
        Creative.campaign_id == campaign_id,
        Creative.headline_id == headline_id,
        Creative.image_id == image_id,
    )
    res = await session.execute(q)
    return res.scalar_one_or_none()


async def create_creative(session: AsyncSession, campaign_id: str, headline_id: str, image_id: str) -> Creative:
    creative = Creative(campaign_id=campaign_id, headline_id=headline_id, image_id=image_id)
    session.add(creative)
    await session.flush()
    await session.refresh(creative)
    return creative


async def get_creative(session: AsyncSession, creative_id: str) -> Optional[Creative]:
    return await session.get(Creative, creative_id)


async def list_active_creatives(session: AsyncSession, campaign_id: str) -> List[Creative]:
    q = (
        select(Creative)
        .where(Creative.campaign_id == campaign_id, Creative.status == RecordStatus.ACTIVE.value)
        .options(selectinload(Creative.headline), selectinload(Creative.image))
        .order_by(Creative.created_at.desc())
    )
    res = await session.execute(q)
    return list(res.scalars().all())


async def delete_creative(session: AsyncSession, creative_id: str) -> None:
    # Plain row delete; the headline and image rows are not touched.
    await session.execute(delete(Creative).where(Creative.id == creative_id))
