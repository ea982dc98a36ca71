"""Recursive-descent parser for the SiteCheck spec language.

Grammar::

    site-spec         ::= url "|" site-predicate
    site-predicate    ::= "element_matches(" literal "," element-predicate ")"
    element-predicate ::= "content_matches(" literal ")"
                        | "not(" element-predicate ")"
    literal           ::= "'" chars "'" | bare-text

Arguments of a call are split on *every* comma, so literals cannot contain
commas.  Every parse failure raises :class:`~site_check.errors.ParseError`
carrying the offending text.
"""
from __future__ import annotations

import re
from typing import List, Optional, Tuple

from site_check.dsl.predicates import (
    ContentMatches,
    ElementMatches,
    ElementPredicate,
    Not,
    SitePredicate,
    SiteSpec,
)
from site_check.errors import ParseError

__all__ = (
    "MAX_NESTING_DEPTH",
    "parse_function_call",
    "strip_single_quotes",
    "parse_element_predicate",
    "parse_site_predicate",
    "parse_site_spec",
)

#: Maximum number of nested ``not(...)`` calls accepted in one predicate.
MAX_NESTING_DEPTH = 32

_CALL_RE = re.compile(r"(\w+)\((.+)\)", re.ASCII | re.DOTALL)
_QUOTED_RE = re.compile(r"'(.+)'", re.DOTALL)


def parse_function_call(text: str) -> Tuple[str, List[str]]:
    """Split ``name(arg1, arg2, ...)`` into the name and stripped arguments."""
    match = _CALL_RE.fullmatch(text)
    if match is None:
        raise ParseError(f"Could not parse function call from: {text}", text)
    name, body = match.groups()
    return name, [arg.strip() for arg in body.split(",")]


def strip_single_quotes(text: str) -> str:
    """Return the inside of ``'...'``, or *text* unchanged when it is not quoted."""
    match = _QUOTED_RE.fullmatch(text)
    return match.group(1) if match else text


def parse_element_predicate(
    text: str, *, max_depth: int = MAX_NESTING_DEPTH, _depth: int = 0
) -> ElementPredicate:
    name, args = parse_function_call(text)
    if name == "content_matches" and len(args) == 1:
        return ContentMatches(strip_single_quotes(args[0]))
    if name == "not" and len(args) == 1:
        if _depth >= max_depth:
            raise ParseError(
                f"Predicate nesting deeper than {max_depth} levels: {text}", text
            )
        return Not(parse_element_predicate(args[0], max_depth=max_depth, _depth=_depth + 1))
    raise ParseError(f"Could not parse element predicate from: {text}", text)


def parse_site_predicate(text: str, *, max_depth: int = MAX_NESTING_DEPTH) -> SitePredicate:
    name, args = parse_function_call(text)
    if name == "element_matches" and len(args) == 2:
        selector = strip_single_quotes(args[0])
        return ElementMatches(selector, parse_element_predicate(args[1], max_depth=max_depth))
    raise ParseError(f"Could not parse site predicate from: {text}", text)


def parse_site_spec(
    line: str,
    *,
    line_number: Optional[int] = None,
    max_depth: int = MAX_NESTING_DEPTH,
) -> SiteSpec:
    """Parse one ``url|predicate`` line.

    The URL is taken verbatim; its validity is only discovered when the page
    is fetched.  Errors from the predicate part are re-raised with the line
    number attached.
    """
    parts = line.split("|")
    if len(parts) != 2:
        raise ParseError(f"Could not parse site spec from: {line}", line, line_number)
    url, predicate_text = parts
    try:
        predicate = parse_site_predicate(predicate_text, max_depth=max_depth)
    except ParseError as exc:
        if line_number is None:
            raise
        raise ParseError(str(exc), exc.text, line_number) from exc
    return SiteSpec(url, predicate)
