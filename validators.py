from collections.abc import Mapping
from typing import Any, Dict, List, Type

from pydantic import BaseModel, ValidationError

_TYPE_NAMES = {"int_type": "integer", "string_type": "string"}


def _message(error: Dict[str, Any]) -> str:
    field = ".".join(str(part) for part in error["loc"])
    kind = error["type"]
    ctx = error.get("ctx", {})
    if kind == "missing" or error.get("input", ...) is None:
        return f"{field} is required"
    if kind in _TYPE_NAMES:
        return f"{field} must be of type {_TYPE_NAMES[kind]}"
    if kind == "greater_than":
        return f"{field} must be greater than {ctx['gt']}"
    if kind == "greater_than_equal":
        return f"{field} must be greater than or equal to {ctx['ge']}"
    if kind == "less_than_equal":
        return f"{field} must be less than or equal to {ctx['le']}"
    return f"{field}: {error['msg']}"


def validate(payload: Any, model: Type[BaseModel]) -> List[str]:
    """Check ``payload`` against ``model``.

    Returns one message per violated field, in field declaration order. An
    empty list means the payload is valid. Keys the model does not declare
    are ignored.
    """
    if not isinstance(payload, Mapping):
        return ["Request body must be a JSON object"]
    try:
        model.model_validate(payload)
    except ValidationError as e:
        return [_message(error) for error in e.errors()]
    return []
