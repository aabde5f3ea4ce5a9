"""Output sinks: files on disk, plain stdout, or one JSON object on stdout."""

import base64
import json
import logging
import sys

from certjson.utils.errors import MarshalError, WriteError
from certjson.utils.fileio import write_file

logger = logging.getLogger(__name__)


def printable_contents(output):
    """Contents as text, base64-encoding binary artifacts."""
    if output.is_binary:
        return base64.b64encode(output.contents).decode("ascii")
    return output.contents


# Characters escaped inside JSON strings so the output is safe to embed in HTML
HTML_ESCAPES = {
    "<": "\\u003c",
    ">": "\\u003e",
    "&": "\\u0026",
    "\u2028": "\\u2028",
    "\u2029": "\\u2029",
}


def to_json(outputs):
    doc = {output.filename: printable_contents(output) for output in outputs}
    try:
        text = json.dumps(doc, sort_keys=True, ensure_ascii=False, separators=(",", ":"))
        return text.translate(str.maketrans(HTML_ESCAPES))
    except (TypeError, ValueError) as e:
        raise MarshalError(f"Failed to marshal to JSON the following data: {doc}") from e


def _write_stream(stream, text):
    try:
        stream.write(text)
        stream.flush()
    except (OSError, UnicodeEncodeError) as e:
        raise WriteError(f"Failed to write to stdout: {e}") from e


def write_json(outputs, stream):
    _write_stream(stream, to_json(outputs) + "\n")


def write_stdout(outputs, stream):
    for output in outputs:
        _write_stream(stream, printable_contents(output) + "\n")


def write_files(outputs):
    for output in outputs:
        write_file(output.filename, output.contents, output.perms)


def emit(outputs, stdout_output=False, json_output=False, stream=None):
    """Send outputs to the sink selected by the flags. JSON output implies stdout."""
    if stream is None:
        stream = sys.stdout

    if json_output:
        logger.debug("Writing %d artifacts as JSON", len(outputs))
        write_json(outputs, stream)
    elif stdout_output:
        logger.debug("Writing %d artifacts to stdout", len(outputs))
        write_stdout(outputs, stream)
    else:
        write_files(outputs)
