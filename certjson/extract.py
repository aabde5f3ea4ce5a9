"""
Field extraction: map a result mapping onto the files it describes.

Plain string fields are resolved through ``FIELDS``, a table of
(canonical name, fallback names) consulted in order. The first name present
in the mapping wins, even when its value is empty. The nested bundle and
the base64 OCSP response need their own steps.
"""

import base64
import binascii
import logging
from dataclasses import dataclass
from typing import Any, Optional, Union

from certjson.envelope import unwrap
from certjson.sink import emit
from certjson.utils.errors import Base64DecodeError, BundleParseError, TypeMismatchError

logger = logging.getLogger(__name__)


@dataclass
class OutputFile:
    filename: str
    contents: Union[str, bytes]
    is_binary: bool = False
    perms: int = 0o644


@dataclass(frozen=True)
class FieldRule:
    names: tuple[str, ...]
    suffix: str
    perms: int
    is_binary: bool = False


CERT = FieldRule(("cert", "certificate"), ".pem", 0o664)
KEY = FieldRule(("key", "private_key"), "-key.pem", 0o600)
ENCRYPTED_KEY = FieldRule(("encrypted_key",), "-key.enc", 0o600, is_binary=True)
CSR = FieldRule(("csr", "certificate_request"), ".csr", 0o644)

FIELDS = (CERT, KEY, ENCRYPTED_KEY, CSR)

BUNDLE_SUFFIX = "-bundle.pem"
ROOT_SUFFIX = "-root.pem"
BUNDLE_PERMS = 0o644

OCSP_FIELD = "ocspResponse"
OCSP_SUFFIX = "-response.der"
OCSP_PERMS = 0o644


def lookup_string(result: dict[str, Any], names) -> Optional[str]:
    """Return the value of the first present name, or None if none is present."""
    for name in names:
        if name not in result:
            continue
        value = result[name]
        if not isinstance(value, str):
            raise TypeMismatchError(name, "string", value)
        return value
    return None


def extract_field(base_name: str, result: dict[str, Any], rule: FieldRule) -> Optional[OutputFile]:
    value = lookup_string(result, rule.names)
    if not value:
        return None
    contents = value.encode("utf-8", errors="replace") if rule.is_binary else value
    return OutputFile(base_name + rule.suffix, contents, rule.is_binary, rule.perms)


def extract_bundle(base_name: str, result: dict[str, Any]) -> list[OutputFile]:
    inner = result.get("result")
    if not isinstance(inner, dict):
        return []
    bundle = inner.get("bundle")
    if not isinstance(bundle, dict):
        return []

    # A bundle object is present, so both halves are now mandatory.
    chain = bundle.get("bundle")
    if not isinstance(chain, str):
        raise BundleParseError("inner bundle parsing failed!")
    root = bundle.get("root")
    if not isinstance(root, str):
        raise BundleParseError("root parsing failed!")

    return [
        OutputFile(base_name + BUNDLE_SUFFIX, chain + "\n" + root, False, BUNDLE_PERMS),
        OutputFile(base_name + ROOT_SUFFIX, root, False, BUNDLE_PERMS),
    ]


def extract_ocsp(base_name: str, result: dict[str, Any]) -> Optional[OutputFile]:
    encoded = lookup_string(result, (OCSP_FIELD,))
    if encoded is None:
        return None
    # line breaks are allowed inside the payload
    encoded = encoded.replace("\r", "").replace("\n", "")
    try:
        der = base64.b64decode(encoded, validate=True)
    except binascii.Error as e:
        raise Base64DecodeError(f"Failed to parse ocspResponse: {e}") from e
    return OutputFile(base_name + OCSP_SUFFIX, der, True, OCSP_PERMS)


def extract_outputs(base_name: str, result: dict[str, Any]) -> list[OutputFile]:
    """
    Build the ordered list of artifacts found in result.

    Order is cert, key, encrypted key, csr, bundle, root, ocsp response.
    Absent fields are skipped; malformed ones raise.
    """
    outs = []
    for rule in FIELDS:
        out = extract_field(base_name, result, rule)
        if out is not None:
            outs.append(out)

    outs.extend(extract_bundle(base_name, result))

    ocsp = extract_ocsp(base_name, result)
    if ocsp is not None:
        outs.append(ocsp)

    logger.debug("Extracted %s", [out.filename for out in outs])
    return outs


def write_output(base_name, data, bare=False, stdout_output=False, json_output=False, stream=None):
    """Unwrap data, extract its artifacts and send them to the chosen sink."""
    result = unwrap(data, bare)
    outs = extract_outputs(base_name, result)
    emit(outs, stdout_output=stdout_output, json_output=json_output, stream=stream)
    return outs
