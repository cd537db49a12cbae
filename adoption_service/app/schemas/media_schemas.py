from datetime import datetime
from typing import List, Optional

from shared.core.schemas import CamelModel


class CarouselImageOut(CamelModel):
    id: int
    filename: str
    url: str
    caption: Optional[str] = None
    description: Optional[str] = None
    position: int
    created_at: Optional[datetime] = None


class MediaOut(CamelModel):
    logo: Optional[str] = None
    carousel: List[CarouselImageOut] = []


class LogoOut(CamelModel):
    url: str


class CarouselUploadOut(CamelModel):
    id: int
    url: str
