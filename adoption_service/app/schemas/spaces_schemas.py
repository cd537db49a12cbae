from datetime import datetime
from typing import Optional

from shared.core.schemas import CamelModel
from .adoptions_schemas import AdoptionOut


class SpaceOut(CamelModel):
    id: int
    name: str
    description: str
    cost: int
    adopted: bool
    adopted_by: Optional[str] = None
    image_url: Optional[str] = None
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None
    adoption: Optional[AdoptionOut] = None


class SpaceImageOut(CamelModel):
    image_url: str
