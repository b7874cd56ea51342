"""Command-line front end: read a config file and print its records."""

from __future__ import annotations

import argparse
import logging
import sys

from rjsconfig.config import XmlReaderConfig
from rjsconfig.errors import RjsConfigException
from rjsconfig.reader import XmlConfigReader

DEFAULT_CONFIG_PATH = "./files/IND15.xml"


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="rjsconfig",
        description="Read RJS and DlsIP entries from an XML config file.",
    )
    parser.add_argument(
        "-c",
        "--config",
        metavar="PATH",
        default=DEFAULT_CONFIG_PATH,
        help=f"Path to the XML config file (default: {DEFAULT_CONFIG_PATH})",
    )
    parser.add_argument(
        "--reader-config",
        metavar="FILE",
        default=None,
        help="YAML or JSON file overriding reader settings",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Log every record read",
    )
    return parser


def main(argv: list[str] | None = None) -> int:
    args = build_parser().parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    try:
        config = (
            XmlReaderConfig.from_file(args.reader_config)
            if args.reader_config
            else XmlReaderConfig()
        )
    except (OSError, ValueError) as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 2

    try:
        data = XmlConfigReader(config).read_file(args.config)
    except RjsConfigException as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 1

    for rjs in data.rjss:
        print(repr(rjs))
    for dlsip in data.diagnet:
        print(f"DlsIP: {dlsip!r}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
