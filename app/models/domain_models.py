# app/models/domain_models.py
from typing import Any, Optional, Tuple
from pydantic import BaseModel, ConfigDict, Field, model_validator

# 32-bit signed range; larger values are rejected as malformed input
INT32_MIN = -2**31
INT32_MAX = 2**31 - 1


class Customer(BaseModel):
    """
    A registered customer. Serialised with the camelCase keys used on the wire
    and in the snapshot file. Missing keys fall back to defaults so that they
    are reported by validation instead of failing the parse.
    """
    model_config = ConfigDict(populate_by_name=True)

    first_name: Optional[str] = Field(default=None, alias="firstName")
    last_name: Optional[str] = Field(default=None, alias="lastName")
    age: int = Field(default=0, ge=INT32_MIN, le=INT32_MAX)
    id: int = Field(default=0, ge=INT32_MIN, le=INT32_MAX)

    @model_validator(mode="before")
    @classmethod
    def match_keys_ignoring_case(cls, data: Any) -> Any:
        # "FirstName", "ID" etc. are accepted as well as the camelCase aliases
        if not isinstance(data, dict):
            return data
        aliases = {(f.alias or name).lower(): f.alias or name for name, f in cls.model_fields.items()}
        return {aliases.get(k.lower(), k) if isinstance(k, str) else k: v for k, v in data.items()}

    def sort_key(self) -> Tuple[str, str]:
        # ordinal, case-insensitive; last name first
        return ((self.last_name or "").upper(), (self.first_name or "").upper())
