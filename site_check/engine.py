# File: site_check/engine.py
"""site_check.engine: Запуск проверок: загрузка страниц, разбор и вычисление предикатов.

Каждая строка проверяется независимой корутиной; все они запускаются разом
через ``asyncio.gather``. Ошибка загрузки или неверный селектор одной строки
превращаются в результат со статусом ``error`` и не затрагивают остальные.
"""

from __future__ import annotations

import asyncio
from pathlib import Path
from typing import List, Optional, Sequence, Union

from site_check.aggregator import CheckReport, CheckResult, CheckStatus
from site_check.config import CheckerConfig, load_config
from site_check.crawler.fetcher import Fetcher, create_session
from site_check.dsl.evaluator import evaluate_site_predicate
from site_check.dsl.predicates import SiteSpec
from site_check.errors import FetchError, SelectorError
from site_check.logger import logger
from site_check.parser.html_parser import load_document
from site_check.spec_file import SpecLine, read_spec_file

__all__ = ["Engine", "check_site_spec", "run_checks"]


async def check_site_spec(fetcher: Fetcher, spec: SiteSpec, line: int = 0) -> CheckResult:
    """Проверяет одну SiteSpec; FetchError и SelectorError становятся статусом ERROR."""
    expression = spec.site_predicate.expression()
    try:
        page = await fetcher.fetch(spec.url)
        document = load_document(page)
        matched = evaluate_site_predicate(document, spec.site_predicate)
    except (FetchError, SelectorError) as exc:
        logger.warning("Check failed for %s: %s", spec.url, exc)
        return CheckResult(line, spec.url, expression, CheckStatus.ERROR, str(exc))

    status = CheckStatus.MATCHED if matched else CheckStatus.NOT_MATCHED
    result = CheckResult(line, spec.url, expression, status)
    logger.info("%s", result.describe())
    return result


def _invalid(line: SpecLine) -> CheckResult:
    url = line.text.split("|", 1)[0]
    return CheckResult(line.number, url, line.text, CheckStatus.INVALID, str(line.error))


async def run_checks(lines: Sequence[SpecLine], config: CheckerConfig) -> CheckReport:
    """Запускает все корректные строки параллельно, результаты в порядке файла."""
    valid = [line for line in lines if line.valid]
    logger.info("Running %d checks (%d invalid lines)", len(valid), len(lines) - len(valid))

    checked: dict[int, CheckResult] = {}
    if valid:
        async with create_session(config) as session:
            fetcher = Fetcher(session)
            results = await asyncio.gather(
                *(check_site_spec(fetcher, line.spec, line.number) for line in valid)
            )
        checked = {r.line: r for r in results}

    report = CheckReport()
    for line in lines:
        report.results.append(checked[line.number] if line.valid else _invalid(line))
    logger.info("Done: %d matched, %d failed", report.matched, report.failed)
    return report


class Engine:
    """Фасад для CLI и тестов: загрузка конфига, чтение спецификаций и запуск проверок."""

    @staticmethod
    def load_config(path: Union[str, Path, None]) -> CheckerConfig:
        """Загружает конфиг из YAML/JSON или использует значения по умолчанию."""
        return load_config(path)

    def __init__(self, config: CheckerConfig) -> None:
        self.config = config

    def load_specs(self, spec_file: Union[str, Path, None] = None) -> List[SpecLine]:
        """Читает строки спецификаций из явного пути или из config.spec_file."""
        path = spec_file if spec_file is not None else self.config.spec_file
        if path is None:
            raise ValueError("No spec file given")
        return read_spec_file(path, max_depth=self.config.max_nesting_depth)

    def run(
        self, spec_file: Union[str, Path, None] = None, *, run_timeout: Optional[float] = None
    ) -> CheckReport:
        """Синхронно выполняет все проверки, при необходимости с общим таймаутом."""
        lines = self.load_specs(spec_file)
        coro = run_checks(lines, self.config)
        try:
            if run_timeout:
                return asyncio.run(asyncio.wait_for(coro, timeout=run_timeout))
            return asyncio.run(coro)
        except asyncio.TimeoutError:
            logger.error("Checks did not finish within %s seconds", run_timeout)
            raise
