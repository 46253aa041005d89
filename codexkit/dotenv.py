"""A deliberately strict parser for simple ``KEY=VALUE`` environment files."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum, auto
from typing import Iterator, List

_UINT16_MAX = 65535
_SPACE = frozenset(" \t\n\v\f\r")


class DotenvError(ValueError):
    """Raised for malformed input, missing keys and values of the wrong kind."""


def _is_alnum(char: str) -> bool:
    return char.isascii() and char.isalnum()


class _State(Enum):
    KEY = auto()
    VALUE = auto()


@dataclass
class Dotenv:
    """Parsed entries, kept as parallel lists of keys and values in file order."""

    keys: List[str] = field(default_factory=list)
    values: List[str] = field(default_factory=list)

    def get_string(self, key: str) -> str:
        """Return the value of the first entry named ``key``."""
        for name, value in zip(self.keys, self.values):
            if name == key:
                return value
        raise DotenvError(f'key not found "{key}"')

    def get_uint16(self, key: str) -> int:
        """Return the value of ``key`` as an unsigned 16-bit integer.

        An empty value reads as 0.
        """
        text = self.get_string(key)
        if text and not all(char in "0123456789" for char in text):
            raise DotenvError(f"value is not a number: {text}")
        number = int(text) if text else 0
        if number > _UINT16_MAX:
            raise DotenvError(
                f"value is out of range (uint16 <- 0...{_UINT16_MAX}): {text}"
            )
        return number

    def get_bool(self, key: str) -> bool:
        """Return the value of ``key``, which must be ``true`` or ``false``."""
        text = self.get_string(key)
        if text == "true":
            return True
        if text == "false":
            return False
        raise DotenvError(f'"{text}" is not a bool value ({key}={text})')

    def __iter__(self) -> Iterator[str]:
        return iter(self.keys)

    def __len__(self) -> int:
        return len(self.values)

    def __contains__(self, key: object) -> bool:
        return key in self.keys


def parse_dotenv(buffer: str) -> Dotenv:
    """Parse ``KEY=VALUE`` lines where keys and values are ASCII letters and digits.

    No spaces, quotes or comments are accepted. A trailing key without ``=`` is
    ignored.
    """
    env = Dotenv()
    state = _State.KEY
    start = 0
    for index, char in enumerate(buffer):
        if state is _State.KEY:
            if char == "=":
                env.keys.append(buffer[start:index])
                start = index + 1
                state = _State.VALUE
            elif char == "\n":
                raise DotenvError(f"unexpected newline (index={index})")
            elif char in _SPACE:
                raise DotenvError(f"spaces (index={index}) are not allowed in .env files")
            elif not _is_alnum(char):
                raise DotenvError(
                    f"character {char!r} (index={index}) is not allowed in .env files"
                )
        else:
            if char == "\n":
                env.values.append(buffer[start:index])
                start = index + 1
                state = _State.KEY
            elif char in _SPACE:
                raise DotenvError(f"spaces (index={index}) are not allowed in .env files")
            elif not _is_alnum(char):
                raise DotenvError(
                    f"character {char!r} (index={index}) is not allowed in .env files "
                    "as part of value"
                )
    if state is _State.VALUE:
        env.values.append(buffer[start:])
    return env