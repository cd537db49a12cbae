from typing import Optional
from fastapi import APIRouter, Depends, File, Form, UploadFile
from sqlalchemy.orm import Session, sessionmaker

from shared.core.database import get_db, get_session_factory
from shared.core.schemas import AckOut
from shared.helpers.json_response_helper import ack_response
from shared.helpers.upload_helper import UploadStore, get_upload_store
from ..crud import media_crud as crud
from ..schemas.media_schemas import CarouselUploadOut, LogoOut, MediaOut

router = APIRouter(
    prefix="/api/media",
    tags=["media"]
)


@router.get("", response_model=MediaOut)
async def get_media(session_factory: sessionmaker = Depends(get_session_factory)):
    return await crud.get_media(session_factory)


@router.post("/logo", response_model=LogoOut)
def upload_logo(
    logo: Optional[UploadFile] = File(None),
    db: Session = Depends(get_db),
    uploads: UploadStore = Depends(get_upload_store)
):
    return crud.set_logo(db, uploads, logo)


@router.post("/carousel", response_model=CarouselUploadOut)
def upload_carousel_image(
    image: Optional[UploadFile] = File(None),
    caption: Optional[str] = Form(None),
    description: Optional[str] = Form(None),
    position: Optional[str] = Form(None),
    db: Session = Depends(get_db),
    uploads: UploadStore = Depends(get_upload_store)
):
    return crud.add_carousel_image(db, uploads, image, caption, description, position)


@router.delete("/carousel/{media_id}", response_model=AckOut)
def delete_carousel_image(media_id: int, db: Session = Depends(get_db)):
    return ack_response(crud.remove_carousel_image(db, media_id))
