from enum import StrEnum
from typing import Optional

from pydantic import BaseModel, ConfigDict


class ToolKind(StrEnum):
    """
    Upstream resource a tool reads from. The value is the PokéAPI path segment.
    """

    POKEMON = "pokemon"
    ABILITY = "ability"


class ErrorKind(StrEnum):
    NOT_FOUND = "not_found"
    HTTP_ERROR = "http_error"
    TRANSPORT = "transport"


class ToolRequest(BaseModel):
    """
    A single lookup, built per call and discarded afterwards.
    Empty names are passed through unchanged.
    """

    model_config = ConfigDict(frozen=True)

    tool_kind: ToolKind
    raw_name: str

    @property
    def normalized_name(self) -> str:
        # PokéAPI only knows lowercase identifiers
        return self.raw_name.lower()


class LookupResult(BaseModel):
    """
    Outcome of one upstream request: either the raw body or a classified error.
    """

    model_config = ConfigDict(frozen=True)

    ok: bool
    body: Optional[str] = None
    error_kind: Optional[ErrorKind] = None
    message: Optional[str] = None

    @classmethod
    def success(cls, body: str) -> "LookupResult":
        return cls(ok=True, body=body)

    @classmethod
    def failure(cls, kind: ErrorKind, message: str) -> "LookupResult":
        return cls(ok=False, error_kind=kind, message=message)
