"""Base classes for page and declaration parsers."""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Generic, TypeVar

from bs4 import Tag

from rb_docset.domain.entities import PageStub

from ..html_handler import ParsedPage

T = TypeVar("T")


class PageParser(ABC):
    """Base class for turning one classified reference page into a PageStub."""

    def parse_page(self, page: ParsedPage) -> PageStub | None:
        """Return the page stub, or None to skip the page."""
        return self._build_result(page)

    @abstractmethod
    def _build_result(self, page: ParsedPage) -> PageStub | None:
        """Build a page stub from a parsed page."""
        ...


class DeclarationParser(ABC, Generic[T]):
    """Base class for extracting one kind of declaration from a DOM subtree."""

    @abstractmethod
    def parse(self, root: Tag) -> list[T]:
        """Return the declarations found under root, in document order."""
        ...
