from sqlalchemy import Boolean, CheckConstraint, Column, DateTime, Integer, String, Text
from sqlalchemy.orm import relationship

from shared.core.database import Base, utcnow


class Space(Base):
    __tablename__ = "spaces"
    __table_args__ = (
        CheckConstraint("cost > 0", name="ck_spaces_cost_positive"),
    )

    id = Column(Integer, primary_key=True, autoincrement=True)
    name = Column(String(200), nullable=False)
    description = Column(Text, nullable=False)
    cost = Column(Integer, nullable=False)

    # cached from the winning adoption, written only by create_adoption
    adopted = Column(Boolean, default=False, nullable=False)
    adopted_by = Column(String(200))

    image_url = Column(String(500))

    created_at = Column(DateTime, default=utcnow, nullable=False)
    updated_at = Column(DateTime, default=utcnow, onupdate=utcnow, nullable=False)

    adoption = relationship("Adoption", back_populates="space", uselist=False)
