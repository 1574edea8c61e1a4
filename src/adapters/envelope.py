"""Parseo del sobre JSON de la API.

Forma fija:

    {"response": {"code": "SUCCESS", "data": {...} | null, "messages": [...]}}

`parse_envelope` devuelve `ApiResponse[T]` o `ApiFailure`; `unwrap_envelope`
además convierte el fallo en la excepción correspondiente. Cuerpos que no son
JSON (`json.JSONDecodeError`) o con otra forma (`pydantic.ValidationError`) se
propagan sin traducir.
"""

from __future__ import annotations

import json
from typing import Any, TypeVar

from pydantic import BaseModel, Field

from core.domain.models import ApiFailure, ApiResponse, ResponseCode
from core.exceptions import ApiError, ApiValidationError

T = TypeVar("T", bound=BaseModel)


class _EnvelopeBody(BaseModel):
    code: str
    data: Any = None
    messages: list[str] = Field(default_factory=list)


class _Envelope(BaseModel):
    response: _EnvelopeBody


def parse_envelope(text: str, data_model: type[T]) -> ApiResponse[T] | ApiFailure:
    envelope = _Envelope.model_validate(json.loads(text))
    body = envelope.response

    if body.code != ResponseCode.SUCCESS.value:
        return ApiFailure(code=body.code, messages=body.messages)

    return ApiResponse[data_model].model_validate(  # type: ignore[valid-type]
        {"code": body.code, "data": body.data, "messages": body.messages}
    )


def error_for(failure: ApiFailure) -> ApiError:
    if failure.is_validation_error:
        return ApiValidationError(failure.code, failure.messages)
    return ApiError(failure.code, failure.messages)


def unwrap_envelope(text: str, data_model: type[T]) -> ApiResponse[T]:
    outcome = parse_envelope(text, data_model)
    if isinstance(outcome, ApiFailure):
        raise error_for(outcome)
    return outcome
