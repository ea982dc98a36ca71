"""site_check.dsl: Язык предикатов: модель, парсер и вычислитель."""

from site_check.dsl.evaluator import evaluate_element_predicate, evaluate_site_predicate
from site_check.dsl.parser import (
    MAX_NESTING_DEPTH,
    parse_element_predicate,
    parse_function_call,
    parse_site_predicate,
    parse_site_spec,
    strip_single_quotes,
)
from site_check.dsl.predicates import (
    ContentMatches,
    ElementMatches,
    ElementPredicate,
    Not,
    SitePredicate,
    SiteSpec,
)

__all__ = [
    "ContentMatches",
    "ElementMatches",
    "ElementPredicate",
    "MAX_NESTING_DEPTH",
    "Not",
    "SitePredicate",
    "SiteSpec",
    "evaluate_element_predicate",
    "evaluate_site_predicate",
    "parse_element_predicate",
    "parse_function_call",
    "parse_site_predicate",
    "parse_site_spec",
    "strip_single_quotes",
]
