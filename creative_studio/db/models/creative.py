# creative_studio/db/models/creative.py
from sqlalchemy import Column, String, DateTime, ForeignKey, UniqueConstraint
from sqlalchemy.orm import relationship
from creative_studio.core.models import RecordStatus
from creative_studio.db.base import Base, new_id, utcnow


class Creative(Base):
    """A headline paired with an image. Deleting it leaves both untouched."""
    __tablename__ = "creatives"
    __table_args__ = (
        UniqueConstraint("headline_id", "image_id", "campaign_id", name="uq_creatives_headline_image_campaign"),
    )

    id = Column(String(36), primary_key=True, default=new_id)
    campaign_id = Column(String(36), ForeignKey("campaigns.id"), nullable=False, index=True)
    headline_id = Column(String(36), ForeignKey("headlines.id"), nullable=False)
    image_id = Column(String(36), ForeignKey("images.id"), nullable=False)
    status = Column(String(20), nullable=False, default=RecordStatus.ACTIVE.value, server_default=RecordStatus.ACTIVE.value)
    created_at = Column(DateTime(timezone=True), default=utcnow, nullable=False)

    campaign = relationship("Campaign", back_populates="creatives")
    headline = relationship("Headline", back_populates="creatives")
    image = relationship("Image", back_populates="creatives")

    def __repr__(self):
        return f"<Creative(id={self.id} headline_id={self.headline_id} image_id={self.image_id})>"
