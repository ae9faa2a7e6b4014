"""Validated purge items."""
from __future__ import annotations

import re
from collections.abc import Iterable
from urllib.parse import urlsplit

from pydantic import BaseModel, ConfigDict

from akamai_purge_tools.errors import InvalidCpCodeError, MalformedUrlError

CPCODE_PATTERN = re.compile(r"[+-]?[0-9]+")


class PurgeUrl(BaseModel):
    """An absolute URL to purge."""

    url: str
    host: str
    path: str

    model_config = ConfigDict(frozen=True)

    @classmethod
    def parse(cls, value: str) -> PurgeUrl:
        """Parse a string into a PurgeUrl."""
        try:
            parts = urlsplit(value)
            host = parts.hostname
            # invalid or out of range ports raise here
            parts.port
        except ValueError:
            raise MalformedUrlError(value) from None

        if not parts.scheme or not host:
            raise MalformedUrlError(value)

        return cls(url=value, host=host, path=parts.path)

    @property
    def segments(self) -> list[str]:
        """Non-empty path segments, e.g. '/a//b/' -> ['a', 'b']."""
        return [part for part in self.path.split("/") if part]

    def __str__(self) -> str:
        return self.url


PurgeItem = PurgeUrl | str | int


def parse_urls(values: Iterable[str]) -> list[PurgeUrl]:
    """All or nothing, the first malformed url aborts the batch."""
    return [PurgeUrl.parse(value) for value in values]


def parse_tags(values: Iterable[str]) -> list[str]:
    return [value for value in values if value]


def parse_cpcodes(values: Iterable[str]) -> list[int]:
    """Plain decimal numbers, e.g. "123" or "-5"."""
    result = []
    for value in values:
        if not CPCODE_PATTERN.fullmatch(value):
            raise InvalidCpCodeError(value)
        result.append(int(value))
    return result
