from typing import List
from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from shared.core.database import get_db
from shared.core.schemas import AckOut
from shared.helpers.json_response_helper import ack_response
from ..crud import adoptions_crud as crud
from ..schemas.adoptions_schemas import (
    AdoptionListItem, AdoptionNotesUpdate, AdoptionStatusOut, AdoptionStatusUpdate)

router = APIRouter(
    prefix="/api/adoptions",
    tags=["adoptions"]
)


@router.get("", response_model=List[AdoptionListItem])
def get_adoptions(db: Session = Depends(get_db)):
    return crud.list_adoptions(db)


@router.put("/{adoption_id}/status", response_model=AdoptionStatusOut)
def update_status(
    adoption_id: int,
    body: AdoptionStatusUpdate,
    db: Session = Depends(get_db)
):
    return crud.update_adoption_status(db, adoption_id, body.status)


@router.put("/{adoption_id}/notes", response_model=AckOut)
def update_notes(
    adoption_id: int,
    body: AdoptionNotesUpdate,
    db: Session = Depends(get_db)
):
    return ack_response(crud.update_adoption_notes(db, adoption_id, body.notes))
