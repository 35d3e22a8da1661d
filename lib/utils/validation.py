"""Validation helpers."""
from pydantic import ValidationError

from lib.contracts.user import User


class DecodeError(ValueError):
    """Request body could not be turned into a :class:`User`."""


def ensure(condition: bool, message: str) -> None:
    if not condition:
        raise ValueError(message)


def decode_user(raw: bytes) -> User:
    """Parse a JSON request body into a :class:`User`.

    Malformed JSON, a non-object payload and wrongly typed fields all surface
    as :class:`DecodeError` carrying pydantic's error text.
    """

    try:
        return User.model_validate_json(raw or b"")
    except ValidationError as exc:
        raise DecodeError(str(exc)) from exc
