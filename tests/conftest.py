"""Shared fixtures for md2html tests."""

import logging
import pytest

from md2html.classifier import ClassificationChain
from md2html.tag_catalog import TagCatalog


@pytest.fixture
def chain():
    """Return a fresh ClassificationChain with the default rules."""
    return ClassificationChain()


@pytest.fixture
def catalog():
    """Return a fresh TagCatalog with the default elements."""
    return TagCatalog()


@pytest.fixture
def write_md(tmp_path):
    """Return a helper that writes Markdown text to a file and returns its path."""
    def _write(text, name="input.md"):
        path = tmp_path / name
        path.write_text(text, encoding="utf-8")
        return str(path)
    return _write


@pytest.fixture
def tmp_output(tmp_path):
    """Return a temporary output path for .html files."""
    return str(tmp_path / "output.html")


@pytest.fixture(autouse=True)
def reset_md2html_logger():
    """Drop handlers installed by cli.setup_logging between tests."""
    yield
    logger = logging.getLogger('md2html')
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
    logger.setLevel(logging.NOTSET)
