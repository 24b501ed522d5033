from __future__ import annotations

import argparse
from collections.abc import Iterable, Iterator
from dataclasses import dataclass


@dataclass(frozen=True)
class LoggingOptions:
    verbosity: int
    quietness: int

    @staticmethod
    def add_to_parser(parser: argparse.ArgumentParser, default_verbosity: int = 0) -> None:
        group = parser.add_argument_group("logging options")
        group.add_argument(
            "-v",
            dest="verbosity",
            action="count",
            default=default_verbosity,
            help="increase the log level (can be specified multiple times)",
        )
        group.add_argument(
            "-q",
            dest="quietness",
            action="count",
            default=0,
            help="decrease the log level (can be specified multiple times)",
        )

    @staticmethod
    def available(args: argparse.Namespace) -> bool:
        return hasattr(args, "verbosity")

    @classmethod
    def collect(cls, args: argparse.Namespace) -> LoggingOptions:
        return cls(
            verbosity=args.verbosity,
            quietness=args.quietness,
        )

    @property
    def level(self) -> int:
        import logging

        verbosity = self.verbosity - self.quietness
        if verbosity > 1:
            return logging.DEBUG
        elif verbosity > 0:
            return logging.INFO
        elif verbosity == 0:
            return logging.WARNING
        else:
            return logging.ERROR

    def init_logging(self) -> None:
        import logging

        from rich.console import Console
        from rich.logging import RichHandler

        # stdout only carries command output.
        handler = RichHandler(console=Console(stderr=True))
        logging.basicConfig(level=self.level, format="%(message)s", handlers=[handler])


@dataclass(frozen=True)
class AddressOptions:
    addresses: list[str]

    @staticmethod
    def add_to_parser(parser: argparse.ArgumentParser) -> None:
        parser.add_argument(
            "addresses",
            metavar="ADDRESS",
            nargs="*",
            help="one or more addresses. if none are given, addresses are read from stdin, one per line",
        )

    @classmethod
    def collect(cls, args: argparse.Namespace) -> AddressOptions:
        return cls(addresses=args.addresses)

    def read(self, stdin: Iterable[str]) -> Iterator[str]:
        """Yields the addresses from the command line, or the non-blank lines of *stdin* if there are none."""

        if self.addresses:
            yield from self.addresses
            return
        for line in stdin:
            line = line.strip()
            if line:
                yield line


@dataclass(frozen=True)
class OutputOptions:
    json: bool

    @staticmethod
    def add_to_parser(parser: argparse.ArgumentParser) -> None:
        group = parser.add_argument_group("output options")
        group.add_argument(
            "--json",
            action="store_true",
            help="print one JSON object per address instead of a table",
        )

    @classmethod
    def collect(cls, args: argparse.Namespace) -> OutputOptions:
        return cls(json=args.json)
