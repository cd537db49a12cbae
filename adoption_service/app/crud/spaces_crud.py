import logging
from typing import List, Optional

from fastapi import UploadFile
from sqlalchemy.orm import Session, joinedload

from shared.core.database import transaction, utcnow
from shared.core.errors import SpaceNotFoundError
from shared.helpers.upload_helper import UploadStore

from ..models.spaces import Space
from ..schemas.adoptions_schemas import AdoptionOut
from ..schemas.spaces_schemas import SpaceImageOut, SpaceOut

logger = logging.getLogger(__name__)


def to_space_out(space: Space) -> SpaceOut:
    out = SpaceOut.model_validate(space)
    # outer-join semantics: only an adopted space carries its adoption
    if space.adopted and space.adoption is not None:
        out.adoption = AdoptionOut.model_validate(space.adoption)
    else:
        out.adoption = None
    return out


def get_space_by_id(db: Session, space_id: int) -> Optional[Space]:
    return db.query(Space).filter(Space.id == space_id).first()


def list_spaces(db: Session) -> List[SpaceOut]:
    spaces = (
        db.query(Space)
        .options(joinedload(Space.adoption))
        .order_by(Space.id)
        .all()
    )
    return [to_space_out(space) for space in spaces]


def get_space(db: Session, space_id: int) -> SpaceOut:
    space = (
        db.query(Space)
        .options(joinedload(Space.adoption))
        .filter(Space.id == space_id)
        .first()
    )
    if not space:
        raise SpaceNotFoundError(space_id)
    return to_space_out(space)


def set_space_image(
    db: Session,
    uploads: UploadStore,
    space_id: int,
    image: Optional[UploadFile]
) -> SpaceImageOut:
    staged = uploads.stage(image, "image", required=True)

    space = get_space_by_id(db, space_id)
    if not space:
        raise SpaceNotFoundError(space_id)

    with uploads.persisted(staged), transaction(db):
        space.image_url = staged.url
        space.updated_at = utcnow()

    logger.info(f"✅ Image updated for space {space_id}: {staged.url}")
    return SpaceImageOut(image_url=staged.url)
