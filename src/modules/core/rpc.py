"""RPC fault type and payload parsing for Celery task handlers.

Task handlers are the Interface layer of this service.  They turn an
incoming message payload into a Pydantic DTO and translate domain
exceptions into ``RpcException``, the only fault type callers see
besides storage errors, which propagate unmodified.
"""

from __future__ import annotations

from typing import Any, List, Mapping, Optional, Type, TypeVar, Union

import structlog
from pydantic import BaseModel
from pydantic import ValidationError as PydanticValidationError
from rest_framework import status

logger = structlog.get_logger(__name__)

DTO = TypeVar("DTO", bound=BaseModel)


class RpcException(Exception):
    """Structured fault returned to the RPC caller.

    ``status`` follows HTTP semantics (400, 404, ...) so callers that
    front this service with an HTTP gateway can forward it as-is.

    The constructor arguments are kept as ``args`` so Celery's JSON
    result backend can rebuild the exception on the caller side.
    """

    def __init__(self, status: int, message: Union[str, List[str]]) -> None:
        super().__init__(status, message)
        self.status = status
        self.message = message

    def __str__(self) -> str:
        if isinstance(self.message, list):
            return "; ".join(self.message)
        return self.message


def format_validation_errors(exc: PydanticValidationError) -> List[str]:
    """Flatten Pydantic errors into ``"<field>: <reason>"`` strings."""
    messages = []
    for error in exc.errors():
        field = ".".join(str(part) for part in error["loc"]) or "payload"
        messages.append(f"{field}: {error['msg']}")
    return messages


def parse_payload(dto_class: Type[DTO], payload: Optional[Mapping[str, Any]]) -> DTO:
    """Validate a message payload into ``dto_class``.

    Raises:
        RpcException: 400 when the payload does not satisfy the DTO.
    """
    try:
        return dto_class.model_validate(payload if payload is not None else {})
    except PydanticValidationError as exc:
        errors = format_validation_errors(exc)
        logger.warning("rpc.invalid_payload", dto=dto_class.__name__, errors=errors)
        raise RpcException(status.HTTP_400_BAD_REQUEST, errors) from exc
