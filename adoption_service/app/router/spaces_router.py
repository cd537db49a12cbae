from typing import List, Optional
from fastapi import APIRouter, Depends, File, UploadFile
from sqlalchemy.orm import Session

from shared.core.database import get_db
from shared.helpers.upload_helper import UploadStore, get_upload_store
from ..crud import adoptions_crud, spaces_crud as crud
from ..schemas.adoptions_schemas import AdoptionCreate, AdoptionCreated
from ..schemas.spaces_schemas import SpaceImageOut, SpaceOut

router = APIRouter(
    prefix="/api/spaces",
    tags=["spaces"]
)


@router.get("", response_model=List[SpaceOut])
def get_spaces(db: Session = Depends(get_db)):
    return crud.list_spaces(db)


@router.get("/{space_id}", response_model=SpaceOut)
def get_space(space_id: int, db: Session = Depends(get_db)):
    return crud.get_space(db, space_id)


@router.post("/{space_id}/adopt", response_model=AdoptionCreated)
def adopt_space(
    space_id: int,
    data: AdoptionCreate = Depends(AdoptionCreate.as_form),
    payment_proof: Optional[UploadFile] = File(None, alias="paymentProof"),
    db: Session = Depends(get_db),
    uploads: UploadStore = Depends(get_upload_store)
):
    return adoptions_crud.create_adoption(db, uploads, space_id, data, payment_proof)


# POST kept for older admin pages
@router.api_route("/{space_id}/image", methods=["PUT", "POST"], response_model=SpaceImageOut)
def upload_space_image(
    space_id: int,
    image: Optional[UploadFile] = File(None),
    db: Session = Depends(get_db),
    uploads: UploadStore = Depends(get_upload_store)
):
    return crud.set_space_image(db, uploads, space_id, image)
