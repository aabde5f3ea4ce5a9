#!/usr/bin/env python3
"""
certjson command line.

Usage:
    certjson [-bare] [-f FILE] [-stdout] [-json] [-version] [base_name]

Reads a CA API response (from FILE, or stdin when FILE is '-') and writes
<base_name>.pem, <base_name>-key.pem, <base_name>.csr and friends.
"""

import argparse
import logging
import platform
import sys

from rich.console import Console

from certjson import __version__
from certjson.config import Settings, get_settings
from certjson.extract import write_output
from certjson.utils.errors import CertJSONError
from certjson.utils.fileio import read_input
from certjson.utils.logging import setup_logging

logger = logging.getLogger(__name__)


def build_parser():
    parser = argparse.ArgumentParser(
        prog="certjson",
        description="Split JSON with cert, csr and key fields into separate files.",
        allow_abbrev=False,
    )
    parser.add_argument("-bare", "--bare", action="store_true",
                        help="the response is not wrapped in the API standard response")
    parser.add_argument("-f", dest="in_file", metavar="FILE", default=Settings.STDIN_SENTINEL,
                        help="JSON input (default: stdin)")
    parser.add_argument("-stdout", "--stdout", dest="stdout_output", action="store_true",
                        help="output the response instead of saving to a file")
    parser.add_argument("-json", "--json", dest="json_output", action="store_true",
                        help="output the response as JSON. Implies -stdout")
    parser.add_argument("-version", "--version", dest="print_version", action="store_true",
                        help="print version and exit")
    parser.add_argument("names", nargs="*", metavar="base_name",
                        help=f"base name for output files (default: {Settings.DEFAULT_BASE_NAME})")
    return parser


def format_version():
    return f"Version: {__version__}\nRuntime: {platform.python_implementation()} {platform.python_version()}\n"


def main(argv=None):
    args = build_parser().parse_args(argv)

    if args.print_version:
        sys.stdout.write(format_version())
        return 0

    setup_logging(get_settings().log_level)
    err_console = Console(stderr=True, highlight=False, soft_wrap=True)

    base_name = args.names[0] if args.names else Settings.DEFAULT_BASE_NAME
    stdout_output = args.stdout_output or args.json_output

    try:
        data = read_input(args.in_file)
        write_output(base_name, data, args.bare, stdout_output, args.json_output)
    except CertJSONError as e:
        logger.debug("Aborting: %s", type(e).__name__)
        err_console.print(str(e), markup=False)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
