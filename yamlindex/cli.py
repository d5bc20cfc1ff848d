"""Command line interface for yamlindex.

Usage:
    yamlindex [-f FILE] type
    yamlindex [-f FILE] length
    yamlindex [-f FILE] get KEY
    yamlindex [-f FILE] path ELEMENT...
    yamlindex [-f FILE] elements

Reads the document from FILE or standard input. Exit status is 0 when a
result was printed, 1 when there is no result (absent key or element),
and 2 on errors.
"""

from __future__ import annotations

import argparse
import logging
import sys
from typing import Callable, Dict, List, Optional

from . import (
    YAMLIndexError,
    yaml_element,
    yaml_element_text,
    yaml_elements,
    yaml_extract_path,
    yaml_extract_path_text,
    yaml_field,
    yaml_field_text,
    yaml_length,
    yaml_object_keys,
    yaml_typeof,
)

logger = logging.getLogger(__name__)

EXIT_OK = 0
EXIT_NOT_FOUND = 1
EXIT_ERROR = 2


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="yamlindex",
        description="Query a YAML document by key or position without loading it",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Log debug information to standard error",
    )
    parser.add_argument(
        "--encoding",
        default="utf-8",
        help="Encoding of the input document (default: utf-8)",
    )
    parser.add_argument(
        "-f",
        "--file",
        dest="file",
        default=None,
        help="Read the document from FILE instead of standard input",
    )
    subparsers = parser.add_subparsers(dest="command", required=True)

    subparsers.add_parser("type", help="Print the type of the root node")
    subparsers.add_parser("length", help="Print the number of elements of a sequence root")
    subparsers.add_parser("keys", help="Print the top-level keys of a mapping root")
    subparsers.add_parser(
        "elements",
        help="Print each element of the root (key<TAB>value for mappings)",
    )

    get = subparsers.add_parser("get", help="Print the YAML value of a top-level key")
    get.add_argument("key")
    get_text = subparsers.add_parser("get-text", help="Print a top-level value as text")
    get_text.add_argument("key")

    element = subparsers.add_parser("element", help="Print the YAML of a sequence element")
    element.add_argument("position", type=int)
    element_text = subparsers.add_parser("element-text", help="Print a sequence element as text")
    element_text.add_argument("position", type=int)

    path = subparsers.add_parser("path", help="Print the YAML at a path of keys and positions")
    path.add_argument("elements", nargs="+", metavar="ELEMENT")
    path_text = subparsers.add_parser("path-text", help="Print the value at a path as text")
    path_text.add_argument("elements", nargs="+", metavar="ELEMENT")
    return parser


def _read_input(path: Optional[str]) -> bytes:
    if path is None:
        return sys.stdin.buffer.read()
    with open(path, "rb") as file:
        return file.read()


def _print_text(value: Optional[str]) -> int:
    if value is None:
        return EXIT_NOT_FOUND
    sys.stdout.write(value if value.endswith("\n") else value + "\n")
    return EXIT_OK


def _one_line(value: Optional[str]) -> str:
    if value is None:
        return ""
    return value.rstrip("\n").replace("\n", "\\n")


def _print_elements(document: bytes, encoding: str) -> int:
    for element in yaml_elements(document, encoding=encoding):
        if isinstance(element, tuple):
            key, value = element
            sys.stdout.write("%s\t%s\n" % (_one_line(key), _one_line(value)))
        else:
            sys.stdout.write(_one_line(element) + "\n")
    return EXIT_OK


def _print_keys(document: bytes, encoding: str) -> int:
    for key in yaml_object_keys(document, encoding=encoding):
        sys.stdout.write(_one_line(key) + "\n")
    return EXIT_OK


def run(args: argparse.Namespace) -> int:
    document = _read_input(args.file)
    encoding = args.encoding
    commands: Dict[str, Callable[[], int]] = {
        "type": lambda: _print_text(yaml_typeof(document, encoding)),
        "length": lambda: _print_text(str(yaml_length(document, encoding))),
        "keys": lambda: _print_keys(document, encoding),
        "elements": lambda: _print_elements(document, encoding),
        "get": lambda: _print_text(yaml_field(document, args.key, encoding)),
        "get-text": lambda: _print_text(yaml_field_text(document, args.key, encoding)),
        "element": lambda: _print_text(yaml_element(document, args.position, encoding)),
        "element-text": lambda: _print_text(
            yaml_element_text(document, args.position, encoding)),
        "path": lambda: _print_text(
            yaml_extract_path(document, *args.elements, encoding=encoding)),
        "path-text": lambda: _print_text(
            yaml_extract_path_text(document, *args.elements, encoding=encoding)),
    }
    return commands[args.command]()


def main(argv: Optional[List[str]] = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(name)s: %(message)s",
    )
    try:
        return run(args)
    except OSError as exc:
        print("yamlindex: %s" % exc, file=sys.stderr)
        return EXIT_ERROR
    except YAMLIndexError as exc:
        logger.debug("%s failed", args.command, exc_info=True)
        print("yamlindex: %s" % exc, file=sys.stderr)
        return EXIT_ERROR


if __name__ == "__main__":  # pragma: no cover - CLI entry point
    raise SystemExit(main())
