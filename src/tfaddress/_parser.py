r"""
A recursive descent parser for Terraform resource addresses. The grammar is:

    address       := (module_path ".")? ("data.")? resource_spec
    module_path   := module ("." module)*
    module        := "module." identifier index?
    resource_spec := identifier "." identifier index?
    index         := "[" (integer | quoted_string) "]"
    integer       := "-"? digit+
    quoted_string := '"' (escaped_char | normal_char)* '"'
    escaped_char  := '\' ('"' | '\')
    identifier    := letter (letter | digit | "_" | "-")*

A `module.<name>` segment is only treated as a module if it is followed by a dot, otherwise it is the resource spec
of a resource with the type `module`. Similarly, `data.` is only treated as the data source marker if it is followed
by a complete `<type>.<name>` pair. This means that a resource with the type `data` can not be addressed if its name
is followed by another segment, e.g. `data.foo.bar` is always the data source `foo.bar`.
"""

from __future__ import annotations

import re
from typing import ClassVar

from ._address import Address, Module, ModulePath, ResourceMode, ResourceSpec
from ._index import ABSENT, Index, IntegerIndex, TextIndex

IDENTIFIER_REGEX = re.compile(r"[A-Za-z][A-Za-z0-9_\-]*")
INTEGER_REGEX = re.compile(r"-?[0-9]+")
MODULE_PREFIX = "module."
DATA_PREFIX = "data."
INT64_MIN = -(2**63)
INT64_MAX = 2**63 - 1


def _describe(text: str, offset: int) -> str:
    if offset >= len(text):
        return "end of input"
    return repr(text[offset])


class ParseError(ValueError):
    """
    Base class for errors raised when a string is not a valid address. The #offset is the position in #text at
    which parsing failed.
    """

    what: ClassVar[str] = "parse error"

    def __init__(self, text: str, offset: int, expected: str, found: str | None = None) -> None:
        self.text = text
        self.offset = offset
        self.expected = expected
        self.found = _describe(text, offset) if found is None else found

    def __str__(self) -> str:
        return f"{self.what} at offset {self.offset}: expected {self.expected}, found {self.found}"

    def excerpt(self) -> str:
        """
        Returns the parsed text and a second line with a caret pointing at the error offset.

            >>> print(UnexpectedToken("aws_instance.9", 13, "identifier").excerpt())
            aws_instance.9
                         ^
        """

        return f"{self.text}\n{' ' * self.offset}^"


class UnexpectedEnd(ParseError):
    """Raised when the input ends before the address is complete."""

    what = "unexpected end of input"


class UnexpectedToken(ParseError):
    """Raised when a character matches none of the productions expected at its position."""

    what = "unexpected token"


class TrailingInput(ParseError):
    """Raised when a complete address was parsed but the input continues after it."""

    what = "trailing input"

    def __init__(self, text: str, offset: int) -> None:
        super().__init__(text, offset, "end of input", repr(text[offset:]))


class _Parser:
    def __init__(self, text: str) -> None:
        self.text = text
        self.pos = 0

    def _error(self, expected: str, offset: int | None = None, found: str | None = None) -> ParseError:
        if offset is None:
            offset = self.pos
        if offset >= len(self.text):
            return UnexpectedEnd(self.text, offset, expected, found)
        return UnexpectedToken(self.text, offset, expected, found)

    def _peek_identifier(self, offset: int) -> int | None:
        """Returns the end offset of the identifier starting at *offset*, if there is one."""

        match = IDENTIFIER_REGEX.match(self.text, offset)
        return match.end() if match else None

    def _literal(self, literal: str) -> None:
        if not self.text.startswith(literal, self.pos):
            raise self._error(repr(literal))
        self.pos += len(literal)

    def _identifier(self) -> str:
        match = IDENTIFIER_REGEX.match(self.text, self.pos)
        if not match:
            raise self._error("identifier")
        self.pos = match.end()
        return match.group()

    def _index(self) -> Index:
        if not self.text.startswith("[", self.pos):
            return ABSENT
        self.pos += 1

        index: Index
        match = INTEGER_REGEX.match(self.text, self.pos)
        if match:
            value = int(match.group())
            if not INT64_MIN <= value <= INT64_MAX:
                raise UnexpectedToken(self.text, self.pos, "a 64-bit integer", match.group())
            self.pos = match.end()
            index = IntegerIndex(value)
        elif self.text.startswith("-", self.pos):
            raise self._error("digit", self.pos + 1)
        elif self.text.startswith('"', self.pos):
            index = self._quoted_string()
        else:
            raise self._error("integer or quoted string")

        self._literal("]")
        return index

    def _quoted_string(self) -> TextIndex:
        start = self.pos
        self.pos += 1
        chars: list[str] = []
        while True:
            if self.pos >= len(self.text):
                raise UnexpectedToken(self.text, start, "closing '\"'", "unterminated quoted string")
            char = self.text[self.pos]
            if char == '"':
                self.pos += 1
                return TextIndex("".join(chars))
            if char == "\\":
                escaped = self.text[self.pos + 1 : self.pos + 2]
                if not escaped:
                    raise UnexpectedToken(self.text, start, "closing '\"'", "unterminated quoted string")
                if escaped not in ('"', "\\"):
                    raise UnexpectedToken(self.text, self.pos, "'\\\"' or '\\\\'", repr(char + escaped))
                chars.append(escaped)
                self.pos += 2
            else:
                chars.append(char)
                self.pos += 1

    def _module(self) -> Module | None:
        """
        Parses a module followed by a dot. If the text at the current position is not a module followed by a
        dot, the position is left untouched and `None` is returned.
        """

        start = self.pos
        if not self.text.startswith(MODULE_PREFIX, start):
            return None
        if self._peek_identifier(start + len(MODULE_PREFIX)) is None:
            return None

        self.pos += len(MODULE_PREFIX)
        name = self._identifier()
        index = self._index()
        if not self.text.startswith(".", self.pos):
            self.pos = start
            return None

        self.pos += 1
        return Module(name, index)

    def _mode(self) -> ResourceMode:
        if self.text.startswith(DATA_PREFIX, self.pos):
            type_end = self._peek_identifier(self.pos + len(DATA_PREFIX))
            if type_end is not None and self.text.startswith(".", type_end):
                if self._peek_identifier(type_end + 1) is not None:
                    self.pos += len(DATA_PREFIX)
                    return ResourceMode.DATA
        return ResourceMode.MANAGED

    def _resource_spec(self) -> ResourceSpec:
        type_ = self._identifier()
        self._literal(".")
        name = self._identifier()
        return ResourceSpec(type_, name, self._index())

    def parse(self) -> Address:
        module_path = ModulePath()
        while True:
            module = self._module()
            if module is None:
                break
            module_path.append(module)

        mode = self._mode()
        resource_spec = self._resource_spec()
        if self.pos < len(self.text):
            raise TrailingInput(self.text, self.pos)

        return Address(module_path, resource_spec, mode)


def parse_address(text: str) -> Address:
    """
    Parse a Terraform resource address.

        >>> parse_address("module.vpc.aws_subnet.private[2]")
        Address('module.vpc.aws_subnet.private[2]')
        >>> parse_address("aws_instance.")
        Traceback (most recent call last):
        tfaddress._parser.UnexpectedEnd: unexpected end of input at offset 13: expected identifier, found end of input

    :raise UnexpectedEnd: If the input ends before the address is complete.
    :raise UnexpectedToken: If a character at some position is not valid for the address grammar.
    :raise TrailingInput: If the input continues after a complete address.
    """

    return _Parser(text).parse()
