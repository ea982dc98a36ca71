"""Тесты для CLI (`site_check/cli.py`) с использованием click.testing.CliRunner.
Проверяют команды `check`, `validate`, `config`, `--version` и обработку ошибок.
"""
import asyncio
import importlib
import json

import pytest
from click.testing import CliRunner

from site_check.aggregator import CheckReport, CheckResult, CheckStatus
from site_check.cli import cli

cli_module = importlib.import_module("site_check.cli")

EXPR = "element_matches('h1', content_matches('Title'))"


@pytest.fixture()
def patch_run_checks(monkeypatch):
    """Патчим run_checks, чтобы не ходить в сеть."""
    calls = []

    async def fake_run_checks(lines, cfg):
        calls.append((lines, cfg))
        results = []
        for line in lines:
            if line.valid:
                results.append(CheckResult(line.number, line.spec.url, EXPR, CheckStatus.MATCHED))
            else:
                results.append(CheckResult(line.number, "", line.text, CheckStatus.INVALID, str(line.error)))
        return CheckReport(results)

    monkeypatch.setattr(cli_module, "run_checks", fake_run_checks)
    return calls


@pytest.fixture()
def good_spec(tmp_path):
    path = tmp_path / "good.txt"
    path.write_text(f"http://example.com|{EXPR}\n", encoding="utf-8")
    return path


def test_version_option():
    runner = CliRunner()
    result = runner.invoke(cli, ["--version"])
    assert result.exit_code == 0
    assert "SiteCheck" in result.output


def test_show_config(tmp_path):
    cfg_file = tmp_path / "config.json"
    cfg_file.write_text(json.dumps({"timeout": 5.0, "user_agent": "Agent/1.0"}), encoding="utf-8")

    runner = CliRunner()
    result = runner.invoke(cli, ["--config", str(cfg_file), "config"])
    assert result.exit_code == 0
    data = json.loads(result.output)
    assert data["timeout"] == 5.0
    assert data["user_agent"] == "Agent/1.0"


def test_bad_config(tmp_path):
    cfg_file = tmp_path / "config.yaml"
    cfg_file.write_text("timeout: -5", encoding="utf-8")

    runner = CliRunner()
    result = runner.invoke(cli, ["--config", str(cfg_file), "config"])
    assert result.exit_code == 1
    assert "Ошибка загрузки конфигурации" in result.output


def test_check_all_matched(patch_run_checks, good_spec):
    runner = CliRunner()
    result = runner.invoke(cli, ["check", "--spec", str(good_spec)])
    assert result.exit_code == 0
    assert f"Predicate {EXPR} matched for URL http://example.com" in result.output
    assert len(patch_run_checks) == 1


def test_check_reads_specfile_env(patch_run_checks, good_spec):
    runner = CliRunner()
    result = runner.invoke(cli, ["check"], env={"SPECFILE": str(good_spec)})
    assert result.exit_code == 0
    lines, _ = patch_run_checks[0]
    assert lines[0].spec.url == "http://example.com"


def test_check_uses_config_spec_file(patch_run_checks, good_spec, tmp_path, monkeypatch):
    monkeypatch.delenv("SPECFILE", raising=False)
    cfg_file = tmp_path / "config.yaml"
    cfg_file.write_text(f"spec_file: {good_spec}\nmax_nesting_depth: 4\n", encoding="utf-8")

    runner = CliRunner()
    result = runner.invoke(cli, ["--config", str(cfg_file), "check"])
    assert result.exit_code == 0
    _, cfg = patch_run_checks[0]
    assert cfg.max_nesting_depth == 4


def test_check_without_spec_file(patch_run_checks, tmp_path, monkeypatch):
    monkeypatch.delenv("SPECFILE", raising=False)
    monkeypatch.chdir(tmp_path)

    runner = CliRunner()
    result = runner.invoke(cli, ["check"])
    assert result.exit_code == 1
    assert "SPECFILE" in result.output
    assert patch_run_checks == []


def test_check_invalid_line_fails(patch_run_checks, spec_file):
    runner = CliRunner()
    result = runner.invoke(cli, ["check", "--spec", str(spec_file)])
    assert result.exit_code == 1
    assert "matched for URL http://example.com" in result.output
    assert "Invalid spec line 2:" in result.output
    assert "not_a_url_without_pipe" in result.output


def test_check_json_and_html_reports(patch_run_checks, good_spec, tmp_path):
    json_out = tmp_path / "out" / "report.json"
    html_out = tmp_path / "out" / "report.html"

    runner = CliRunner()
    result = runner.invoke(
        cli,
        ["check", "--spec", str(good_spec), "--json", str(json_out), "--html", str(html_out), "--pretty"],
    )
    assert result.exit_code == 0
    data = json.loads(json_out.read_text(encoding="utf-8"))
    assert data["summary"]["matched"] == 1
    assert data["results"][0]["status"] == "matched"
    html = html_out.read_text(encoding="utf-8")
    assert "http://example.com" in html
    assert "content_matches(&#39;Title&#39;)" in html


def test_check_timeout(monkeypatch, good_spec):
    async def slow(lines, cfg):
        await asyncio.sleep(2)
        return CheckReport()

    monkeypatch.setattr(cli_module, "run_checks", slow)

    runner = CliRunner()
    result = runner.invoke(cli, ["check", "--spec", str(good_spec), "--run-timeout", "0.2"])
    assert result.exit_code == 1
    assert "не завершены" in result.output


def test_validate(spec_file):
    runner = CliRunner()
    result = runner.invoke(cli, ["validate", "--spec", str(spec_file)])
    assert result.exit_code == 1
    assert f"Line 1: http://example.com {EXPR}" in result.output
    assert "line 2" in result.output
    assert "1 valid, 1 invalid" in result.output


def test_validate_ok(good_spec):
    runner = CliRunner()
    result = runner.invoke(cli, ["validate", "--spec", str(good_spec)])
    assert result.exit_code == 0
    assert "1 valid, 0 invalid" in result.output
