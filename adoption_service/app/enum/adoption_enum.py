from enum import Enum


class AdoptionStatus(str, Enum):
    PENDING = "pending"
    APPROVED = "approved"
    CONFIRMED = "confirmed"
    COMPLETED = "completed"
    CANCELLED = "cancelled"
    REJECTED = "rejected"


ADOPTION_STATUSES = [status.value for status in AdoptionStatus]


class MediaType(str, Enum):
    LOGO = "logo"
    CAROUSEL = "carousel"
