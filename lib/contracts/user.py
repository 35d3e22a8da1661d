"""User record exchanged over the users API."""
from typing import Any

from pydantic import BaseModel, field_validator, model_validator


class User(BaseModel):
    """A single user record.

    Fields are never checked for format or emptiness.  Missing fields and
    explicit ``null`` values both decode to an empty string; unknown keys are
    ignored.  Keys match field names without regard to case (``"Id"`` fills
    ``id``); when a field is named more than once the last key wins.
    """

    id: str = ""
    name: str = ""
    email: str = ""

    @model_validator(mode="before")
    @classmethod
    def _fold_keys(cls, data: Any) -> Any:
        if not isinstance(data, dict):
            return data
        fields = {name.casefold(): name for name in cls.model_fields}
        folded = {}
        for key, value in data.items():
            name = key if key in cls.model_fields else fields.get(str(key).casefold())
            if name is not None:
                folded[name] = value
        return folded

    @field_validator("id", "name", "email", mode="before")
    @classmethod
    def _null_as_empty(cls, value: Any) -> Any:
        return "" if value is None else value
