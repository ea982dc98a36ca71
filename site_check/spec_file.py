# File: site_check/spec_file.py
"""site_check.spec_file: Чтение файла спецификаций с изоляцией ошибок по строкам."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import List, Optional, Union

from site_check.dsl.parser import MAX_NESTING_DEPTH, parse_site_spec
from site_check.dsl.predicates import SiteSpec
from site_check.errors import ParseError
from site_check.logger import logger

__all__ = ("SpecLine", "parse_spec_text", "read_spec_file")


@dataclass(slots=True)
class SpecLine:
    """Строка файла: либо разобранная SiteSpec, либо ошибка разбора."""

    number: int
    text: str
    spec: Optional[SiteSpec] = None
    error: Optional[ParseError] = None

    @property
    def valid(self) -> bool:
        return self.error is None


def parse_spec_text(text: str, *, max_depth: int = MAX_NESTING_DEPTH) -> List[SpecLine]:
    """Разбирает каждую непустую строку отдельно; ошибка одной строки не мешает остальным."""
    lines: List[SpecLine] = []
    for number, raw in enumerate(text.splitlines(), start=1):
        if not raw.strip():
            continue
        try:
            spec = parse_site_spec(raw, line_number=number, max_depth=max_depth)
        except ParseError as exc:
            logger.error("%s", exc)
            lines.append(SpecLine(number, raw, error=exc))
        else:
            lines.append(SpecLine(number, raw, spec=spec))
    logger.debug("Parsed %d spec lines", len(lines))
    return lines


def read_spec_file(path: Union[str, Path], *, max_depth: int = MAX_NESTING_DEPTH) -> List[SpecLine]:
    """Читает файл спецификаций в UTF-8."""
    p = Path(path).expanduser()
    if not p.is_file():
        logger.error("Spec file not found: %s", p)
        raise FileNotFoundError(f"Spec file not found: {p}")
    return parse_spec_text(p.read_text(encoding="utf-8"), max_depth=max_depth)
