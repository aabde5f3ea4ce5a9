"""
Parsing of the CA API response envelope.

A response looks like::

    {"success": true, "result": {...}, "errors": [], "messages": []}

Each entry in errors/messages is {"code": int, "message": str}.
"""

import json
import logging
from typing import Any, Dict, List, Optional

from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator

from certjson.utils.errors import ParseError, RequestFailedError

logger = logging.getLogger(__name__)


class ResponseMessage(BaseModel):
    """One entry of the errors or messages list."""

    model_config = ConfigDict(strict=True)

    code: Optional[int] = Field(None, description="API status code")
    message: Optional[str] = Field(None, description="Human readable text")

    @property
    def text(self) -> str:
        return self.message or ""


class Response(BaseModel):
    """The success/result/errors/messages envelope. Null fields take their defaults."""

    model_config = ConfigDict(strict=True)

    success: bool = Field(False, description="Whether the request succeeded")
    result: Dict[str, Any] = Field(default_factory=dict, description="Artifacts keyed by field name")
    errors: List[ResponseMessage] = Field(default_factory=list)
    messages: List[ResponseMessage] = Field(default_factory=list)

    @field_validator("success", mode="before")
    @classmethod
    def null_success(cls, v: Any) -> Any:
        return False if v is None else v

    @field_validator("result", mode="before")
    @classmethod
    def null_result(cls, v: Any) -> Any:
        return {} if v is None else v

    @field_validator("errors", "messages", mode="before")
    @classmethod
    def null_messages(cls, v: Any) -> Any:
        return [] if v is None else v


def describe_validation_error(error: ValidationError) -> str:
    parts = []
    for detail in error.errors():
        loc = ".".join(str(part) for part in detail["loc"])
        parts.append(f"{loc}: {detail['msg']}" if loc else detail["msg"])
    return "; ".join(parts)


def parse_bare(data: bytes) -> Dict[str, Any]:
    try:
        parsed = json.loads(data)
    except ValueError:
        parsed = None
    if not isinstance(parsed, dict):
        raise ParseError(f"Failed to parse JSON: {_as_text(data)}")
    return parsed


def parse_response(data: bytes) -> Response:
    try:
        return Response.model_validate_json(data)
    except ValidationError as e:
        raise ParseError(f"Failed to parse input: {describe_validation_error(e)}") from e


def unwrap(data: bytes, bare: bool) -> Dict[str, Any]:
    """
    Turn raw input into the mapping that holds the artifacts.

    Args:
        data: Raw JSON bytes
        bare: Treat the document itself as the result mapping

    Returns:
        The result mapping

    Raises:
        ParseError: Input is not JSON of the expected shape
        RequestFailedError: The envelope reports success=false
    """
    if bare:
        result = parse_bare(data)
        logger.debug("Parsed bare object with keys %s", sorted(result))
        return result

    response = parse_response(data)
    if not response.success:
        raise RequestFailedError([msg.text for msg in response.errors])

    for msg in response.messages:
        logger.info("Server message %s: %s", msg.code, msg.text)
    logger.debug("Parsed response with result keys %s", sorted(response.result))
    return response.result


def _as_text(data):
    if isinstance(data, bytes):
        return data.decode("utf-8", errors="replace")
    return str(data)
