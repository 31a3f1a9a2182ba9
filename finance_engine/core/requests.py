"""Turn caller input into validated request models."""

from __future__ import annotations

import logging
from typing import Any, Mapping, Type, TypeVar, Union

from pydantic import BaseModel, ValidationError

from finance_engine.domain.errors import InvalidArgument

logger = logging.getLogger(__name__)

RequestT = TypeVar("RequestT", bound=BaseModel)


def as_request(model: Type[RequestT], payload: Union[RequestT, Mapping[str, Any]]) -> RequestT:
    """Validate ``payload`` into ``model``, raising InvalidArgument on failure."""
    if isinstance(payload, model):
        return payload
    try:
        return model.model_validate(payload)
    except ValidationError as exc:
        error = InvalidArgument.from_validation_error(exc)
        logger.info("rejected %s: %s", model.__name__, error)
        raise error from exc
