import logging
import os
import sys

from certjson.config import Settings
from certjson.utils.errors import ReadError, WriteError

logger = logging.getLogger(__name__)


def read_input(filespec):
    """Read all bytes from filespec, or from stdin when filespec is '-'."""
    try:
        if filespec == Settings.STDIN_SENTINEL:
            data = sys.stdin.buffer.read()
        else:
            with open(filespec, 'rb') as f:
                data = f.read()
    except OSError as e:
        raise ReadError(f"Failed to read input: {e}", {"filespec": filespec}) from e

    logger.debug("Read %d bytes from %s", len(data), filespec)
    return data


def write_file(filespec, contents, perms):
    """Write contents to filespec, truncating it, and set its mode to perms."""
    if isinstance(contents, str):
        contents = contents.encode('utf-8', errors='replace')

    try:
        fd = os.open(filespec, os.O_WRONLY | os.O_CREAT | os.O_TRUNC, perms)
        with os.fdopen(fd, 'wb') as f:
            # umask only applies on creation; pin the mode for new and existing files
            os.fchmod(f.fileno(), perms)
            f.write(contents)
    except OSError as e:
        raise WriteError(f"{e}", {"filespec": filespec}) from e

    logger.debug("Wrote %s (%d bytes, mode %04o)", filespec, len(contents), perms)
