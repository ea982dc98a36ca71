from pathlib import Path

import pytest

from site_check.config import CheckerConfig
from site_check.crawler.models import PageData


@pytest.fixture()
def spec_file(tmp_path) -> Path:
    """
    Write a small spec file with one valid and one malformed line.
    """
    path = tmp_path / "sites.txt"
    path.write_text(
        "http://example.com|element_matches('h1', content_matches('Title'))\n"
        "not_a_url_without_pipe\n",
        encoding="utf-8",
    )
    return path


@pytest.fixture()
def basic_config() -> CheckerConfig:
    """
    Return a CheckerConfig with short timeouts for tests.
    """
    return CheckerConfig(timeout=2.0, user_agent="TestAgent/1.0")


@pytest.fixture()
def title_page() -> PageData:
    """
    Provide a PageData whose <h1> text is exactly "Title".
    """
    html = "<html><head><title>T</title></head><body><h1>Title</h1><p class='x'>one</p><p>two</p></body></html>"
    return PageData(url="http://example.com/", content=html)
