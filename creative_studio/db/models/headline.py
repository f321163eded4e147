# creative_studio/db/models/headline.py
from sqlalchemy import Column, String, Text, DateTime, ForeignKey
from sqlalchemy.orm import relationship
from creative_studio.core.models import RecordStatus
from creative_studio.db.base import Base, new_id, utcnow


class Headline(Base):
    __tablename__ = "headlines"

    id = Column(String(36), primary_key=True, default=new_id)
    text = Column(Text, nullable=False)
    campaign_id = Column(String(36), ForeignKey("campaigns.id"), nullable=False, index=True)
    status = Column(String(20), nullable=False, default=RecordStatus.ACTIVE.value, server_default=RecordStatus.ACTIVE.value)
    created_at = Column(DateTime(timezone=True), default=utcnow, nullable=False)

    campaign = relationship("Campaign", back_populates="headlines")
    creatives = relationship("Creative", back_populates="headline")

    def __repr__(self):
        return f"<Headline(id={self.id} campaign_id={self.campaign_id})>"
