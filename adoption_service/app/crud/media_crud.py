import asyncio
import logging
from typing import Callable, List, Optional, TypeVar

from fastapi import UploadFile
from sqlalchemy.orm import Session, sessionmaker
from starlette.concurrency import run_in_threadpool

from shared.core.database import transaction, utcnow
from shared.core.errors import MediaNotFoundError
from shared.helpers.form_helper import parse_int
from shared.helpers.upload_helper import UploadStore

from ..enum.adoption_enum import MediaType
from ..models.media import Media
from ..schemas.media_schemas import CarouselImageOut, CarouselUploadOut, LogoOut, MediaOut

logger = logging.getLogger(__name__)

T = TypeVar("T")


def get_logo_url(db: Session) -> Optional[str]:
    logo = (
        db.query(Media)
        .filter(Media.type == MediaType.LOGO.value, Media.active == True)
        .order_by(Media.created_at.desc(), Media.id.desc())
        .first()
    )
    return logo.url if logo else None


def get_carousel(db: Session) -> List[CarouselImageOut]:
    images = (
        db.query(Media)
        .filter(Media.type == MediaType.CAROUSEL.value, Media.active == True)
        .order_by(Media.position, Media.created_at, Media.id)
        .all()
    )
    return [CarouselImageOut.model_validate(image) for image in images]


def _in_own_session(session_factory: sessionmaker, fetch: Callable[[Session], T]) -> T:
    db = session_factory()
    try:
        return fetch(db)
    finally:
        db.close()


async def get_media(session_factory: sessionmaker) -> MediaOut:
    # logo and carousel are independent reads, each on its own session
    logo, carousel = await asyncio.gather(
        run_in_threadpool(_in_own_session, session_factory, get_logo_url),
        run_in_threadpool(_in_own_session, session_factory, get_carousel),
    )
    return MediaOut(logo=logo, carousel=carousel)


def set_logo(db: Session, uploads: UploadStore, logo: Optional[UploadFile]) -> LogoOut:
    staged = uploads.stage(logo, "logo", required=True)

    with uploads.persisted(staged), transaction(db):
        now = utcnow()
        db.query(Media).filter(
            Media.type == MediaType.LOGO.value,
            Media.active == True
        ).update({Media.active: False, Media.updated_at: now}, synchronize_session=False)
        db.add(Media(
            type=MediaType.LOGO.value,
            filename=staged.stored_name,
            url=staged.url,
            active=True,
            created_at=now,
            updated_at=now,
        ))

    logger.info(f"✅ Logo uploaded: {staged.url}")
    return LogoOut(url=staged.url)


def add_carousel_image(
    db: Session,
    uploads: UploadStore,
    image: Optional[UploadFile],
    caption: Optional[str] = None,
    description: Optional[str] = None,
    position: Optional[str] = None
) -> CarouselUploadOut:
    staged = uploads.stage(image, "image", required=True)

    media = Media(
        type=MediaType.CAROUSEL.value,
        filename=staged.stored_name,
        url=staged.url,
        caption=caption or "",
        description=description or "",
        position=parse_int(position, default=0),
        active=True,
    )
    with uploads.persisted(staged), transaction(db):
        db.add(media)
        db.flush()
        media_id = media.id

    logger.info(f"✅ Carousel image {media_id} uploaded: {staged.url}")
    return CarouselUploadOut(id=media_id, url=staged.url)


def remove_carousel_image(db: Session, media_id: int) -> int:
    media = (
        db.query(Media)
        .filter(
            Media.id == media_id,
            Media.type == MediaType.CAROUSEL.value,
            Media.active == True
        )
        .first()
    )
    if not media:
        raise MediaNotFoundError(media_id)

    with transaction(db):
        media.active = False
        media.updated_at = utcnow()

    logger.info(f"✅ Carousel image {media_id} deactivated")
    return media_id
