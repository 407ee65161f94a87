"""Shared HTML page fixtures for rb_docset tests."""

from __future__ import annotations

from collections.abc import Callable

import pytest

from tests.pages import (
    DATA_TYPES_SECTION,
    ENUM_SECTION,
    FRAMEWORK_PATH,
    FUNCTIONS_SECTION,
    METHOD_BLOCK,
    PROPERTY_BLOCK,
    specbox,
)


@pytest.fixture
def make_page() -> Callable[..., str]:
    """Build a reference page with the given title and body markup."""

    def _make(
        title: str,
        body: str = "",
        superclass: str | None = None,
        framework_path: str | None = FRAMEWORK_PATH,
        abstract: str | None = None,
    ) -> str:
        abstract_html = f'<p class="abstract">{abstract}</p>' if abstract is not None else ""
        return (
            f"<html><head><title>{title}</title></head><body>"
            f"{specbox(superclass, framework_path)}{abstract_html}{body}"
            "</body></html>"
        )

    return _make


@pytest.fixture
def class_page_html(make_page) -> str:
    return make_page(
        "Foo Class Reference",
        PROPERTY_BLOCK + METHOD_BLOCK + ENUM_SECTION,
        superclass="Bar",
        abstract="The Foo class does things.",
    )


@pytest.fixture
def protocol_page_html(make_page) -> str:
    return make_page(
        "FooDelegate Protocol Reference",
        METHOD_BLOCK,
        abstract="Delegate of Foo.",
    )


@pytest.fixture
def reference_page_html(make_page) -> str:
    return make_page("Foo Functions Reference", FUNCTIONS_SECTION + DATA_TYPES_SECTION, framework_path=None)
