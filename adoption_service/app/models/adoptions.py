from sqlalchemy import Boolean, Column, DateTime, ForeignKey, Integer, String, Text
from sqlalchemy.orm import relationship

from shared.core.database import Base, utcnow
from ..enum.adoption_enum import AdoptionStatus


class Adoption(Base):
    __tablename__ = "adoptions"

    id = Column(Integer, primary_key=True, autoincrement=True)
    # unique: a losing concurrent adopter fails at commit
    space_id = Column(Integer, ForeignKey("spaces.id"), nullable=False, unique=True)

    sponsor_name = Column(String(200), nullable=False)
    sponsor_email = Column(String(200))
    sponsor_phone = Column(String(50))
    wants_to_help = Column(Boolean, default=False, nullable=False)
    payment_proof_url = Column(String(500))

    status = Column(String(24), default=AdoptionStatus.PENDING.value, nullable=False)
    notes = Column(Text)

    created_at = Column(DateTime, default=utcnow, nullable=False)
    updated_at = Column(DateTime, default=utcnow, onupdate=utcnow, nullable=False)

    space = relationship("Space", back_populates="adoption")
