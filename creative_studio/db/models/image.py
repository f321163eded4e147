# creative_studio/db/models/image.py
from sqlalchemy import Column, String, Text, DateTime, ForeignKey
from sqlalchemy.orm import relationship
from creative_studio.core.models import RecordStatus
from creative_studio.db.base import Base, new_id, utcnow


class Image(Base):
    __tablename__ = "images"

    id = Column(String(36), primary_key=True, default=new_id)
    image_url = Column(String(2048), nullable=False)
    prompt = Column(Text, nullable=False)
    campaign_id = Column(String(36), ForeignKey("campaigns.id"), nullable=False, index=True)
    status = Column(String(20), nullable=False, default=RecordStatus.ACTIVE.value, server_default=RecordStatus.ACTIVE.value)
    created_at = Column(DateTime(timezone=True), default=utcnow, nullable=False)

    campaign = relationship("Campaign", back_populates="images")
    creatives = relationship("Creative", back_populates="image")

    def __repr__(self):
        return f"<Image(id={self.id} campaign_id={self.campaign_id})>"
