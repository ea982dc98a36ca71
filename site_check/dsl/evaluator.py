"""site_check.dsl.evaluator: Вычисление предикатов над разобранным HTML-документом."""

from __future__ import annotations

from typing import assert_never

from bs4 import BeautifulSoup
from bs4.element import Tag
from soupsieve import SelectorSyntaxError

from site_check.dsl.predicates import ContentMatches, ElementMatches, ElementPredicate, Not, SitePredicate
from site_check.errors import SelectorError
from site_check.logger import logger

__all__ = ("evaluate_element_predicate", "evaluate_site_predicate")


def evaluate_element_predicate(element: Tag, predicate: ElementPredicate) -> bool:
    """Проверяет предикат элемента; текст сравнивается без нормализации пробелов."""
    if isinstance(predicate, ContentMatches):
        return element.get_text() == predicate.content
    if isinstance(predicate, Not):
        return not evaluate_element_predicate(element, predicate.sub_predicate)
    assert_never(predicate)


def evaluate_site_predicate(document: BeautifulSoup, predicate: SitePredicate) -> bool:
    """Проверяет предикат сайта на документе.

    Селектор указывает на первый подходящий элемент. Если ничего не найдено,
    результат ``False`` и предупреждение в логе, исключения нет.
    """
    if isinstance(predicate, ElementMatches):
        try:
            element = document.select_one(predicate.selector)
        except (SelectorSyntaxError, NotImplementedError) as exc:
            raise SelectorError(predicate.selector, str(exc)) from exc
        if element is None:
            logger.warning("Could not find element %s", predicate.selector)
            return False
        return evaluate_element_predicate(element, predicate.element_predicate)
    assert_never(predicate)
