from __future__ import annotations

import argparse
import builtins
import json
import logging
import sys
import textwrap
from collections.abc import Iterable, Iterator
from functools import partial
from typing import NoReturn

import rich
from rich.table import Table
from rich.text import Text
from termcolor import colored

from tfaddress import __version__
from tfaddress._address import Address
from tfaddress._option_sets import AddressOptions, LoggingOptions, OutputOptions
from tfaddress._parser import ParseError, parse_address
from tfaddress._renderable import Renderable

logger = logging.getLogger(__name__)
print = partial(builtins.print, flush=True)


def _get_argument_parser(prog: str) -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog,
        formatter_class=lambda prog: argparse.RawDescriptionHelpFormatter(prog, width=120, max_help_position=60),
        description=textwrap.dedent(
            """
            Parse and format Terraform resource addresses.

            An address has the form [module.<name>[<index>].]...[data.]<type>.<name>[<index>], where an index is
            either an integer or a double quoted string.
            """
        ),
    )
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    subparsers = parser.add_subparsers(dest="cmd")

    fmt = subparsers.add_parser("fmt", help="print the canonical form of each address")
    LoggingOptions.add_to_parser(fmt)
    AddressOptions.add_to_parser(fmt)

    parse = subparsers.add_parser("parse", help="print the components of each address")
    LoggingOptions.add_to_parser(parse)
    OutputOptions.add_to_parser(parse)
    AddressOptions.add_to_parser(parse)

    check = subparsers.add_parser("check", help="only validate the addresses")
    LoggingOptions.add_to_parser(check)
    AddressOptions.add_to_parser(check)

    return parser


def _print_error(exc: ParseError) -> None:
    print(colored("error:", "red", attrs=["bold"]), exc, file=sys.stderr)
    print(textwrap.indent(exc.excerpt(), "  "), file=sys.stderr)


def _iter_addresses(texts: Iterable[str], errors: list[ParseError]) -> Iterator[Address]:
    """
    Parses each of the *texts*. Invalid addresses are reported on stderr and appended to *errors*.
    """

    for text in texts:
        try:
            address = parse_address(text)
        except ParseError as exc:
            logger.debug("Could not parse %r", text, exc_info=True)
            _print_error(exc)
            errors.append(exc)
            continue
        logger.debug("Parsed %r as %r", text, address)
        yield address


def _cell(obj: Renderable) -> Text:
    # Text cells are not parsed as markup.
    return Text(obj.render() or "-")


def fmt(addresses: Iterable[Address]) -> None:
    for address in addresses:
        print(address.render())


def parse(addresses: Iterable[Address], output_options: OutputOptions) -> None:
    if output_options.json:
        for address in addresses:
            print(json.dumps(address.to_json()))
        return

    table = Table("Address", "Module path", "Mode", "Type", "Name", "Index")
    for address in addresses:
        table.add_row(
            Text(address.render()),
            _cell(address.module_path),
            Text(address.mode.value),
            Text(address.resource_spec.type),
            Text(address.resource_spec.name),
            _cell(address.resource_spec.index),
        )
    rich.print(table)


def check(addresses: Iterable[Address]) -> None:
    count = sum(1 for _ in addresses)
    logger.info("%d valid address(es)", count)


def main(prog: str = "tfaddress", argv: list[str] | None = None) -> NoReturn:
    parser = _get_argument_parser(prog)
    args = parser.parse_args(sys.argv[1:] if argv is None else argv)

    if not args.cmd:
        parser.print_usage()
        sys.exit(0)

    if LoggingOptions.available(args):
        LoggingOptions.collect(args).init_logging()

    errors: list[ParseError] = []
    addresses = _iter_addresses(AddressOptions.collect(args).read(sys.stdin), errors)

    if args.cmd == "fmt":
        fmt(addresses)
    elif args.cmd == "parse":
        parse(addresses, OutputOptions.collect(args))
    elif args.cmd == "check":
        check(addresses)
    else:
        assert False, args.cmd

    if errors:
        logger.info("%d invalid address(es)", len(errors))
        sys.exit(1)

    sys.exit(0)


if __name__ == "__main__":
    main()
