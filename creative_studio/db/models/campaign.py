# creative_studio/db/models/campaign.py
from sqlalchemy import Column, String, Text, DateTime
from sqlalchemy.orm import relationship
from creative_studio.db.base import Base, new_id, utcnow


class Campaign(Base):
    __tablename__ = "campaigns"

    id = Column(String(36), primary_key=True, default=new_id)
    name = Column(String(255), nullable=False)
    industry = Column(String(255), nullable=False)
    audience = Column(String(255), nullable=False)
    tone = Column(String(32), nullable=False)
    description = Column(Text, nullable=True)
    created_at = Column(DateTime(timezone=True), default=utcnow, nullable=False, index=True)

    # No cascades: headlines/images/creatives are only ever removed explicitly.
    headlines = relationship(
        "Headline",
        back_populates="campaign",
        order_by="Headline.created_at.desc()",
    )
    images = relationship(
        "Image",
        back_populates="campaign",
        order_by="Image.created_at.desc()",
    )
    creatives = relationship(
        "Creative",
        back_populates="campaign",
        order_by="Creative.created_at.desc()",
    )

    def __repr__(self):
        return f"<Campaign(id={self.id} name={self.name} tone={self.tone})>"
