from datetime import datetime
from fastapi import Form
from typing import Any, Optional

from shared.core.schemas import CamelModel
from shared.helpers.form_helper import parse_flag
from shared.wrappers.empty_string_model_wrapper import EmptyStringModel


class AdoptionCreate(EmptyStringModel):
    sponsor_name: Optional[str] = None
    sponsor_email: Optional[str] = None
    sponsor_phone: Optional[str] = None
    wants_to_help: bool = False

    @classmethod
    def as_form(
        cls,
        sponsor_name: Optional[str] = Form(None, alias="sponsorName"),
        sponsor_email: Optional[str] = Form(None, alias="sponsorEmail"),
        sponsor_phone: Optional[str] = Form(None, alias="sponsorPhone"),
        wants_to_help: Optional[str] = Form(None, alias="wantsToHelp"),
    ):
        return cls(
            sponsor_name=sponsor_name,
            sponsor_email=sponsor_email,
            sponsor_phone=sponsor_phone,
            wants_to_help=parse_flag(wants_to_help),
        )


class AdoptionCreated(CamelModel):
    adoption_id: int
    space_id: str
    sponsor_name: str


class AdoptionOut(CamelModel):
    id: int
    space_id: int
    sponsor_name: str
    sponsor_email: Optional[str] = None
    sponsor_phone: Optional[str] = None
    wants_to_help: bool
    payment_proof_url: Optional[str] = None
    status: str
    notes: Optional[str] = None
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None


class AdoptionListItem(AdoptionOut):
    space_name: str
    space_cost: int


class AdoptionStatusUpdate(CamelModel):
    status: Optional[Any] = None


class AdoptionStatusOut(CamelModel):
    id: int
    status: str


class AdoptionNotesUpdate(CamelModel):
    notes: Optional[str] = None
