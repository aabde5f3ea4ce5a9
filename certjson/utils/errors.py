"""
Exceptions raised while turning a CA response into output files.

Every error here is terminal: the CLI prints it and exits with status 1.
"""

from typing import Any, Optional


class CertJSONError(Exception):
    """Base exception for all certjson errors."""

    def __init__(self, message: str, details: Optional[dict[str, Any]] = None) -> None:
        super().__init__(message)
        self.message = message
        self.details = details or {}

    def __str__(self) -> str:
        return self.message


class ReadError(CertJSONError):
    """Input source could not be read."""

    pass


class ParseError(CertJSONError):
    """Input is not valid JSON of the expected shape."""

    pass


class RequestFailedError(CertJSONError):
    """The response envelope reports an unsuccessful request."""

    def __init__(self, messages: list[str]) -> None:
        lines = ["Request failed:"] + [f"\t{msg}" for msg in messages]
        super().__init__("\n".join(lines), {"errors": list(messages)})
        self.messages = list(messages)


class TypeMismatchError(CertJSONError):
    """A known field is present but holds the wrong JSON type."""

    def __init__(self, field: str, expected: str, value: Any) -> None:
        found = json_type_name(value)
        message = f"Field '{field}' must be a {expected}, got {found}"
        super().__init__(message, {"field": field, "expected": expected, "found": found})
        self.field = field


class BundleParseError(CertJSONError):
    """A bundle mapping is present but lacks its chain or root."""

    pass


class Base64DecodeError(CertJSONError):
    """A base64 payload could not be decoded."""

    pass


class MarshalError(CertJSONError):
    """Artifacts could not be serialized to JSON."""

    pass


class WriteError(CertJSONError):
    """An output destination could not be written."""

    pass


def json_type_name(value: Any) -> str:
    if value is None:
        return "null"
    if isinstance(value, bool):
        return "boolean"
    if isinstance(value, (int, float)):
        return "number"
    if isinstance(value, str):
        return "string"
    if isinstance(value, list):
        return "array"
    if isinstance(value, dict):
        return "object"
    return type(value).__name__
