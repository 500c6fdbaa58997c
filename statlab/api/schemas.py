# statlab - Engine Schemas
# Pydantic request/response models for the statistics engine boundary

from __future__ import annotations

from enum import Enum
from typing import Annotated, Any, Literal, Optional, Union

from pydantic import BaseModel, ConfigDict, Field, TypeAdapter, field_validator

from statlab.stats.sanitizer import normalize_key


class ResponseType(str, Enum):
    """Kinds of message the engine answers with."""
    DESCRIPTIVE_RESULT = "DESCRIPTIVE_RESULT"
    INFERENTIAL_RESULT = "INFERENTIAL_RESULT"
    ERROR = "ERROR"


class DescriptiveRequest(BaseModel):
    """Descriptive pass over every column of a dataset."""

    model_config = ConfigDict(frozen=True)

    type: Literal["DESCRIPTIVE"] = "DESCRIPTIVE"
    rows: list[dict[str, Any]] = Field(default_factory=list, description="Parsed data rows")


class InferentialRequest(BaseModel):
    """Inferential run for a primary and an optional secondary variable."""

    model_config = ConfigDict(frozen=True)

    type: Literal["INFERENTIAL"] = "INFERENTIAL"
    var1: str = Field(default="", description="Primary (numeric) variable")
    var2: Optional[str] = Field(default=None, description="Secondary variable")
    rows: list[dict[str, Any]] = Field(default_factory=list, description="Parsed data rows")

    @field_validator("var1", mode="before")
    @classmethod
    def clean_primary(cls, v: Any) -> str:
        return normalize_key(v) or ""

    @field_validator("var2", mode="before")
    @classmethod
    def clean_secondary(cls, v: Any) -> Optional[str]:
        return normalize_key(v)


EngineRequest = Annotated[
    Union[DescriptiveRequest, InferentialRequest],
    Field(discriminator="type")
]

engine_request_adapter: TypeAdapter[EngineRequest] = TypeAdapter(EngineRequest)


class EngineResponse(BaseModel):
    """Result or error message for exactly one request."""

    type: ResponseType
    payload: Any = None
    request_id: Optional[str] = None

    @property
    def is_error(self) -> bool:
        return self.type == ResponseType.ERROR

    @classmethod
    def error(cls, message: str, request_id: Optional[str] = None) -> "EngineResponse":
        return cls(type=ResponseType.ERROR, payload=message, request_id=request_id)
