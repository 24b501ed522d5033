from __future__ import annotations

import abc
import dataclasses


def quote(value: str) -> str:
    """
    Quote a string for use in an address index. Only double quotes and backslashes are escaped.

        >>> print(quote('a"b'))
        "a\\"b"
        >>> print(quote("C:\\\\temp"))
        "C:\\\\temp"
    """

    return '"' + value.replace("\\", "\\\\").replace('"', '\\"') + '"'


class Index(abc.ABC):
    """
    The optional bracketed qualifier of a module or resource that selects one instance among many. An index is
    either an integer (#IntegerIndex), a string key (#TextIndex) or absent (#AbsentIndex).
    """

    @abc.abstractmethod
    def render(self) -> str:
        """Returns the canonical text of the index, without the enclosing brackets."""

        raise NotImplementedError

    def is_absent(self) -> bool:
        return False

    def __str__(self) -> str:
        return self.render()

    @staticmethod
    def of(value: int | str | Index | None) -> Index:
        """
        Creates an index from a Python value.

            >>> Index.of(3)
            IntegerIndex(value=3)
            >>> Index.of("web")
            TextIndex(value='web')
            >>> Index.of(None)
            AbsentIndex()
            >>> Index.of(True)
            Traceback (most recent call last):
            TypeError: cannot create an Index from bool
        """

        if isinstance(value, Index):
            return value
        if value is None:
            return ABSENT
        if isinstance(value, bool):
            raise TypeError("cannot create an Index from bool")
        if isinstance(value, int):
            return IntegerIndex(value)
        if isinstance(value, str):
            return TextIndex(value)
        raise TypeError(f"cannot create an Index from {type(value).__name__}")


@dataclasses.dataclass(frozen=True)
class AbsentIndex(Index):
    def render(self) -> str:
        return ""

    def is_absent(self) -> bool:
        return True


@dataclasses.dataclass(frozen=True)
class IntegerIndex(Index):
    value: int

    def render(self) -> str:
        return str(self.value)


@dataclasses.dataclass(frozen=True)
class TextIndex(Index):
    value: str

    def render(self) -> str:
        return quote(self.value)


ABSENT = AbsentIndex()
