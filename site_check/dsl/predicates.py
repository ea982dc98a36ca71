"""Predicate data model for the SiteCheck spec language.

Two closed families of predicates:

* element predicates — :class:`ContentMatches`, :class:`Not`;
* site predicates — :class:`ElementMatches`.

All nodes are frozen dataclasses, so a parsed tree is immutable and compares
structurally::

    >>> Not(ContentMatches("Hello")) == Not(ContentMatches("Hello"))
    True

Every node renders itself back to spec-language text with ``expression()``;
reports use it so that each result can be traced to its source predicate.
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import Union

__all__ = (
    "ContentMatches",
    "Not",
    "ElementPredicate",
    "ElementMatches",
    "SitePredicate",
    "SiteSpec",
)


@dataclass(frozen=True, slots=True)
class ContentMatches:
    """Text content of the element equals ``content`` exactly."""

    content: str

    def expression(self) -> str:
        return f"content_matches('{self.content}')"


@dataclass(frozen=True, slots=True)
class Not:
    """Negation of another element predicate."""

    sub_predicate: ElementPredicate

    def expression(self) -> str:
        return f"not({self.sub_predicate.expression()})"


ElementPredicate = Union[ContentMatches, Not]


@dataclass(frozen=True, slots=True)
class ElementMatches:
    """The element found by ``selector`` satisfies ``element_predicate``."""

    selector: str
    element_predicate: ElementPredicate

    def expression(self) -> str:
        return f"element_matches('{self.selector}', {self.element_predicate.expression()})"


SitePredicate = ElementMatches


@dataclass(frozen=True, slots=True)
class SiteSpec:
    """One spec-file line: a URL bound to the predicate checked against it."""

    url: str
    site_predicate: SitePredicate
