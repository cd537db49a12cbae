from sqlalchemy import Boolean, Column, DateTime, Index, Integer, String, Text, text

from shared.core.database import Base, utcnow


class Media(Base):
    __tablename__ = "media"
    __table_args__ = (
        # at most one active logo
        Index(
            "uq_media_active_logo", "type", unique=True,
            sqlite_where=text("type = 'logo' AND active = 1"),
            postgresql_where=text("type = 'logo' AND active = true"),
        ),
    )

    id = Column(Integer, primary_key=True, autoincrement=True)
    type = Column(String(16), nullable=False)
    filename = Column(String(255), nullable=False)
    url = Column(String(500), nullable=False)
    caption = Column(String(255))
    description = Column(Text)
    position = Column(Integer, default=0, nullable=False)
    active = Column(Boolean, default=True, nullable=False)

    created_at = Column(DateTime, default=utcnow, nullable=False)
    updated_at = Column(DateTime, default=utcnow, onupdate=utcnow, nullable=False)
