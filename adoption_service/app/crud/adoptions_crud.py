import logging
from typing import Any, List, Optional

from fastapi import UploadFile
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from shared.core.database import transaction, utcnow
from shared.core.errors import (
    AdoptionNotFoundError,
    ErrorCode,
    SpaceAlreadyAdoptedError,
    SpaceNotFoundError,
    ValidationError,
)
from shared.helpers.upload_helper import UploadStore

from ..enum.adoption_enum import ADOPTION_STATUSES, AdoptionStatus
from ..models.adoptions import Adoption
from ..models.spaces import Space
from ..schemas.adoptions_schemas import (
    AdoptionCreate,
    AdoptionCreated,
    AdoptionListItem,
    AdoptionOut,
    AdoptionStatusOut,
)
from .spaces_crud import get_space_by_id

logger = logging.getLogger(__name__)


def get_adoption_by_id(db: Session, adoption_id: int) -> Optional[Adoption]:
    return db.query(Adoption).filter(Adoption.id == adoption_id).first()


def create_adoption(
    db: Session,
    uploads: UploadStore,
    space_id: int,
    data: AdoptionCreate,
    payment_proof: Optional[UploadFile] = None
) -> AdoptionCreated:
    """Claim a space for a sponsor.

    The space flag and the adoption row are committed together; the unique
    constraint on adoptions.space_id turns a lost race into the same
    conflict the pre-check reports.
    """
    sponsor_name = (data.sponsor_name or "").strip()
    if not sponsor_name:
        raise ValidationError("Sponsor name is required")

    staged = uploads.stage(payment_proof, "paymentProof")

    space = get_space_by_id(db, space_id)
    if not space:
        raise SpaceNotFoundError(space_id)
    if space.adopted:
        raise SpaceAlreadyAdoptedError(space_id)

    adoption = Adoption(
        space_id=space.id,
        sponsor_name=sponsor_name,
        sponsor_email=data.sponsor_email,
        sponsor_phone=data.sponsor_phone,
        wants_to_help=data.wants_to_help,
        payment_proof_url=staged.url if staged else None,
        status=AdoptionStatus.PENDING.value,
    )

    try:
        with uploads.persisted(staged), transaction(db):
            space.adopted = True
            space.adopted_by = sponsor_name
            space.updated_at = utcnow()
            db.add(adoption)
            db.flush()
            adoption_id = adoption.id
    except IntegrityError as exc:
        logger.warning(f"Concurrent adoption of space {space_id} lost at commit")
        raise SpaceAlreadyAdoptedError(space_id) from exc

    logger.info(f"✅ Adoption {adoption_id} created for space {space_id} by {sponsor_name}")
    return AdoptionCreated(
        adoption_id=adoption_id,
        space_id=str(space_id),
        sponsor_name=sponsor_name,
    )


def list_adoptions(db: Session) -> List[AdoptionListItem]:
    rows = (
        db.query(Adoption, Space.name.label("space_name"), Space.cost.label("space_cost"))
        .join(Space, Adoption.space_id == Space.id)
        .order_by(Adoption.created_at.desc(), Adoption.id.desc())
        .all()
    )

    results = []
    for row in rows:
        adoption = row[0]
        data = {
            **AdoptionOut.model_validate(adoption).model_dump(),
            "space_name": row.space_name,
            "space_cost": row.space_cost,
        }
        results.append(AdoptionListItem.model_validate(data))
    return results


def update_adoption_status(db: Session, adoption_id: int, status: Optional[Any]) -> AdoptionStatusOut:
    # case-insensitive; any status may move to any other, only membership is checked
    normalized = str(status).strip().lower() if status is not None else ""
    if normalized not in ADOPTION_STATUSES:
        raise ValidationError(
            f"Invalid status. Allowed values: {', '.join(ADOPTION_STATUSES)}",
            code=ErrorCode.INVALID_STATUS,
        )

    adoption = get_adoption_by_id(db, adoption_id)
    if not adoption:
        raise AdoptionNotFoundError(adoption_id)

    with transaction(db):
        adoption.status = normalized
        adoption.updated_at = utcnow()

    logger.info(f"✅ Adoption {adoption_id} status set to {normalized}")
    return AdoptionStatusOut(id=adoption_id, status=normalized)


def update_adoption_notes(db: Session, adoption_id: int, notes: Optional[str]):
    adoption = get_adoption_by_id(db, adoption_id)
    if not adoption:
        raise AdoptionNotFoundError(adoption_id)

    with transaction(db):
        adoption.notes = notes
        adoption.updated_at = utcnow()

    logger.info(f"✅ Notes updated for adoption {adoption_id}")
    return adoption_id
