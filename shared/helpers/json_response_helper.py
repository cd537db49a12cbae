from typing import Any

from shared.core.errors import ErrorCode
from shared.core.schemas import AckOut, JsonOutResult


def ack_response(id: Any = None) -> AckOut:
    return AckOut(success=True, id=id)


def error_payload(message: str, status_code: str = ErrorCode.INVALID_INPUT.value) -> dict:
    return JsonOutResult(
        data=None,
        status="Failure",
        status_code=status_code,
        message=message
    ).model_dump()
