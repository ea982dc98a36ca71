#!/usr/bin/env python3
"""
Точка входа SiteCheck для командной строки.

Команды:
  check     Загрузить страницы и проверить предикаты из файла спецификаций
  validate  Только разобрать файл спецификаций и показать ошибки
  config    Показать текущую конфигурацию

Общие опции:
  --config PATH       Путь к YAML/JSON-конфигу (default: configs/default.yaml, если есть)
  --log-level LEVEL   Уровень логирования (DEBUG, INFO, ...)
  --log-file PATH     Файл для логов (stdout, если не указан)
  --log-format FORMAT Формат логирования

Опции check / validate:
  --spec PATH         Файл спецификаций (или переменная окружения SPECFILE)

Опции check:
  --json PATH         Сохранить JSON-отчёт в файл
  --html PATH         Сохранить HTML-отчёт в файл
  --template DIR      Папка с шаблоном report.html.j2
  --pretty            Преформатировать JSON-вывод (отступ 2)
  --run-timeout SEC   Таймаут всего запуска (секунд)

Пример:
  SPECFILE=sites.txt site-check check --json report.json
"""
import asyncio
import sys
from pathlib import Path

import click

from site_check import __version__
from site_check.config import load_config
from site_check.engine import run_checks
from site_check.logger import DEFAULT_FORMAT, init_logging
from site_check.report.html_report import render_html
from site_check.report.json_report import render_json
from site_check.spec_file import read_spec_file

CONTEXT_SETTINGS = dict(help_option_names=["--help"])

spec_option = click.option(
    '--spec', '-s', 'spec_path',
    envvar='SPECFILE',
    default=None,
    type=click.Path(exists=True, dir_okay=False, path_type=Path),
    help='Файл спецификаций url|predicate (по умолчанию $SPECFILE или spec_file из конфига).'
)


def print_error(message: str):
    click.secho(message, fg='red', err=True)
    sys.exit(1)


def _load_lines(cfg, spec_path):
    path = spec_path or cfg.spec_file
    if path is None:
        print_error('SPECFILE environment variable is not defined and no --spec given')
    try:
        return read_spec_file(path, max_depth=cfg.max_nesting_depth)
    except (OSError, UnicodeDecodeError) as e:
        print_error(f'Ошибка чтения файла спецификаций: {e}')


@click.group(context_settings=CONTEXT_SETTINGS)
@click.version_option(__version__, '--version', '-v', message='SiteCheck, version %(version)s')
@click.option(
    '--config', '-c', 'config_path',
    default=None,
    type=click.Path(exists=True, dir_okay=False, path_type=Path),
    help='Путь к файлу конфигурации YAML/JSON.'
)
@click.option(
    '--log-level', 'log_level',
    default='INFO', show_default=True,
    type=click.Choice(['DEBUG', 'INFO', 'WARNING', 'ERROR', 'CRITICAL']),
    help='Уровень логирования'
)
@click.option(
    '--log-file', 'log_file',
    default=None,
    type=click.Path(writable=True, dir_okay=False, path_type=Path),
    help='Путь к файлу логов (stdout, если не указан)'
)
@click.option(
    '--log-format', 'log_format',
    default=DEFAULT_FORMAT,
    show_default=True,
    help='Строка формата для логов'
)
@click.pass_context
def cli(ctx, config_path, log_level, log_file, log_format):
    """Группа команд SiteCheck CLI."""
    init_logging(
        level=log_level,
        log_file=str(log_file) if log_file else None,
        log_format=log_format
    )
    try:
        cfg = load_config(config_path)
    except Exception as e:
        print_error(f'Ошибка загрузки конфигурации: {e}')
    ctx.ensure_object(dict)
    ctx.obj['config'] = cfg


@cli.command('check', context_settings=CONTEXT_SETTINGS)
@spec_option
@click.option(
    '--json', '-j', 'json_output',
    default=None,
    type=click.Path(writable=True, dir_okay=False, path_type=Path),
    help='Сохранить JSON-отчёт в файл'
)
@click.option(
    '--html', 'html_output',
    default=None,
    type=click.Path(writable=True, dir_okay=False, path_type=Path),
    help='Сохранить HTML-отчёт в файл'
)
@click.option(
    '--template', '-t', 'template_dir',
    default=None,
    type=click.Path(exists=True, file_okay=False, path_type=Path),
    help='Папка с шаблоном report.html.j2 (встроенный, если не указана)'
)
@click.option(
    '--pretty', is_flag=True,
    help='Преформатировать JSON-отчёт (отступ 2)'
)
@click.option(
    '--run-timeout', 'run_timeout',
    type=float,
    default=None,
    help='Таймаут всего запуска (секунд)'
)
@click.pass_context
def check(ctx, spec_path, json_output, html_output, template_dir, pretty, run_timeout):
    """Проверить все строки файла спецификаций."""
    cfg = ctx.obj['config']
    lines = _load_lines(cfg, spec_path)
    try:
        if run_timeout:
            report = asyncio.run(
                asyncio.wait_for(run_checks(lines, cfg), timeout=run_timeout)
            )
        else:
            report = asyncio.run(run_checks(lines, cfg))
    except asyncio.TimeoutError:
        print_error(f'Проверки не завершены за {run_timeout} секунд')
    except Exception as e:
        print_error(f'Ошибка при проверке: {e}')

    for result in report.results:
        click.echo(result.describe())

    if json_output:
        try:
            saved_json = render_json(report, json_output, pretty=pretty)
            click.echo(f'JSON report: {saved_json}')
        except Exception as e:
            print_error(f'Ошибка при сохранении JSON: {e}')

    if html_output:
        try:
            saved_html = render_html(report, template_dir, html_output)
            click.echo(f'HTML report: {saved_html}')
        except Exception as e:
            print_error(f'Ошибка при сохранении HTML: {e}')

    if not report.ok:
        ctx.exit(1)


@cli.command('validate', context_settings=CONTEXT_SETTINGS)
@spec_option
@click.pass_context
def validate(ctx, spec_path):
    """Разобрать файл спецификаций без загрузки страниц."""
    cfg = ctx.obj['config']
    lines = _load_lines(cfg, spec_path)
    invalid = [line for line in lines if not line.valid]
    for line in lines:
        if line.valid:
            click.echo(f'Line {line.number}: {line.spec.url} {line.spec.site_predicate.expression()}')
        else:
            click.secho(f'{line.error}', fg='red', err=True)
    click.echo(f'{len(lines) - len(invalid)} valid, {len(invalid)} invalid')
    if invalid:
        ctx.exit(1)


@cli.command('config', context_settings=CONTEXT_SETTINGS)
@click.pass_context
def show_config(ctx):
    """Показать текущую конфигурацию в JSON."""
    cfg = ctx.obj['config']
    click.echo(cfg.model_dump_json(indent=2))


if __name__ == "__main__":
    cli()
