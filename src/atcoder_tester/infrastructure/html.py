"""Parsed HTML documents tagged with their page type."""

from dataclasses import dataclass
from typing import Generic, TypeVar

from bs4 import BeautifulSoup

P = TypeVar("P")


@dataclass(frozen=True)
class Html(Generic[P]):
    """Parsed document of a page of kind ``P``."""

    soup: BeautifulSoup

    @classmethod
    def parse(cls, text: str) -> "Html[P]":
        return cls(BeautifulSoup(text, "lxml"))
