"""Request body validation built on pydantic schemas."""

from __future__ import annotations

from typing import Any, Type, TypeVar

from pydantic import BaseModel
from pydantic import ValidationError as PydanticValidationError

from .error_handlers import ValidationError

SchemaT = TypeVar('SchemaT', bound=BaseModel)


def format_pydantic_errors(exc: PydanticValidationError) -> list[dict[str, str]]:
    """Flatten pydantic errors into ``{field, message}`` pairs."""

    return [
        {
            'field': '.'.join(str(part) for part in error['loc']),
            'message': error['msg'],
        }
        for error in exc.errors()
    ]


def validate_payload(schema: Type[SchemaT], payload: Any, message: str = 'Invalid data') -> SchemaT:
    """Parse ``payload`` into ``schema`` or raise :class:`ValidationError`."""

    if payload is None:
        raise ValidationError(message, errors=[{'field': '', 'message': 'Request body must be JSON'}])
    try:
        return schema.model_validate(payload)
    except PydanticValidationError as exc:
        raise ValidationError(message, errors=format_pydantic_errors(exc)) from exc
