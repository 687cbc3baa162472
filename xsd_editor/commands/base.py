# xsd_editor/commands/base.py
"""
Base command types shared by every command family.

A command is a transient value: {type: <tag>, payload: <family payload>}.
It is built once by the editor and consumed once by the executor.
"""

from enum import Enum
from typing import Any, Optional

from pydantic import BaseModel, ConfigDict, model_validator
from pydantic.alias_generators import to_camel


class WireModel(BaseModel):
    """camelCase on the wire, snake_case in Python."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    def to_wire(self) -> dict:
        return self.model_dump(by_alias=True, exclude_none=True, mode="json")


class ContentModel(str, Enum):
    SEQUENCE = "sequence"
    CHOICE = "choice"
    ALL = "all"


VALID_CONTENT_MODELS = [m.value for m in ContentModel]


class BaseCommand(WireModel):
    type: str
    payload: Any


class CommandResponse(WireModel):
    success: bool
    error: Optional[str] = None
    data: Optional[Any] = None

    @model_validator(mode="after")
    def _error_iff_failure(self):
        if self.success and self.error is not None:
            raise ValueError("A successful response cannot carry an error")
        if not self.success and not (self.error or "").strip():
            raise ValueError("A failed response requires a non-empty error message")
        return self

    @classmethod
    def ok(cls, data: Optional[Any] = None) -> "CommandResponse":
        return cls(success=True, data=data)

    @classmethod
    def fail(cls, error: str, data: Optional[Any] = None) -> "CommandResponse":
        return cls(success=False, error=error, data=data)
