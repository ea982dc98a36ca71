"""site_check.aggregator: Результаты проверок и сводный отчёт."""

from __future__ import annotations

import json
from dataclasses import asdict, dataclass, field
from enum import Enum
from typing import Any, Dict, List


class CheckStatus(str, Enum):
    """Итог проверки одной строки спецификации."""

    MATCHED = "matched"
    NOT_MATCHED = "not_matched"
    INVALID = "invalid"
    ERROR = "error"


@dataclass(slots=True)
class CheckResult:
    """Результат одной строки: URL, предикат и статус."""

    line: int
    url: str
    expression: str
    status: CheckStatus
    detail: str = ""

    @property
    def matched(self) -> bool:
        return self.status is CheckStatus.MATCHED

    def describe(self) -> str:
        """Строка для консоли."""
        if self.status is CheckStatus.MATCHED:
            return f"Predicate {self.expression} matched for URL {self.url}"
        if self.status is CheckStatus.NOT_MATCHED:
            return f"Predicate {self.expression} did not match for URL {self.url}"
        if self.status is CheckStatus.INVALID:
            return f"Invalid spec {self.detail}"
        return f"Check failed at line {self.line} for URL {self.url}: {self.detail}"

    def to_dict(self) -> Dict[str, Any]:
        data = asdict(self)
        data["status"] = self.status.value
        return data


@dataclass(slots=True)
class CheckReport:
    """Все результаты запуска в порядке строк файла спецификаций."""

    results: List[CheckResult] = field(default_factory=list)

    @property
    def matched(self) -> int:
        return sum(1 for r in self.results if r.matched)

    @property
    def failed(self) -> int:
        return len(self.results) - self.matched

    @property
    def ok(self) -> bool:
        return self.failed == 0

    def summary(self) -> Dict[str, int]:
        counts = {status.value: 0 for status in CheckStatus}
        for r in self.results:
            counts[r.status.value] += 1
        counts["total"] = len(self.results)
        return counts

    def to_dict(self) -> Dict[str, Any]:
        return {"summary": self.summary(), "results": [r.to_dict() for r in self.results]}

    def json(self, *, pretty: bool = False) -> str:
        """Возвращает JSON-представление отчёта."""
        return json.dumps(self.to_dict(), ensure_ascii=False, indent=2 if pretty else None)


__all__ = ["CheckStatus", "CheckResult", "CheckReport"]
