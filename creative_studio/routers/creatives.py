# creative_studio/routers/creatives.py
"""
Headline/image pairing
"""

from fastapi import APIRouter, Depends, Query
from sqlalchemy.ext.asyncio import AsyncSession
from typing import Optional

from creative_studio.core.config import settings
from creative_studio.core.errors import ValidationError
from creative_studio.db.session import get_async_session
from creative_studio.schemas.common import envelope
from creative_studio.schemas.creative import CreativePairRequest, CreativeOut, CreativeDetailOut
from creative_studio.services.creative_service import creative_service

router = APIRouter(prefix=f"{settings.API_PREFIX}/creatives", tags=["Creatives"])


@router.post("")
async def create_creative(
    request: CreativePairRequest,
    session: AsyncSession = Depends(get_async_session),
):
    creative = await creative_service.create_pair(
        session, request.campaign_id, request.headline_id, request.image_id
    )
    return envelope(creative=CreativeOut.model_validate(creative).to_json())


@router.get("")
async def list_creatives(
    campaign_id: Optional[str] = Query(None, alias="campaignId"),
    session: AsyncSession = Depends(get_async_session),
):
    creatives = await creative_service.list_pairs(session, campaign_id)
    return envelope(creatives=[CreativeDetailOut.model_validate(c).to_json() for c in creatives])


@router.delete("")
@router.delete("/")
async def delete_creative_without_id():
    raise ValidationError("Creative ID is required")


@router.delete("/{creative_id}")
async def delete_creative(
    creative_id: str,
    session: AsyncSession = Depends(get_async_session),
):
    """Unpair: removes the creative only, headline and image stay."""
    await creative_service.delete_pair(session, creative_id)
    return {"success": True, "message": "Creative pair removed successfully"}
