"""site_check.errors: Иерархия исключений SiteCheck."""

from __future__ import annotations

from typing import Optional

__all__ = ["SiteCheckError", "ParseError", "FetchError", "SelectorError"]


class SiteCheckError(Exception):
    """Базовое исключение проекта."""


class ParseError(SiteCheckError):
    """Raised when a predicate expression or a spec line cannot be parsed."""

    def __init__(self, message: str, text: str, line_number: Optional[int] = None):
        self.text = text
        self.line_number = line_number
        if line_number is not None:
            message = f"line {line_number}: {message}"
        super().__init__(message)


class FetchError(SiteCheckError):
    """Страница не загружена: статус вне 2xx или сбой транспорта."""

    def __init__(self, url: str, reason: str, status: Optional[int] = None):
        self.url = url
        self.reason = reason
        self.status = status
        super().__init__(f"Failed to load {url}: {reason}")


class SelectorError(SiteCheckError):
    """CSS-селектор не удалось разобрать."""

    def __init__(self, selector: str, reason: str):
        self.selector = selector
        super().__init__(f"Invalid selector {selector!r}: {reason}")
