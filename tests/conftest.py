"""Pytest configuration and shared fixtures for the mdgrid test suite."""

import os
from pathlib import Path

import pytest
from hypothesis import Phase, Verbosity, settings

from mdgrid.ast import Document
from mdgrid.parsers.markdown import parse_markdown

# Register custom Hypothesis profiles
settings.register_profile("ci", max_examples=200, verbosity=Verbosity.verbose)
settings.register_profile("dev", max_examples=50)
settings.register_profile(
    "debug", max_examples=10, verbosity=Verbosity.verbose, phases=[Phase.explicit, Phase.reuse, Phase.generate]
)
settings.load_profile(os.getenv("HYPOTHESIS_PROFILE", "dev"))


def pytest_configure(config):
    """Configure pytest with custom markers."""
    config.addinivalue_line("markers", "unit: Unit tests - fast, isolated component tests")
    config.addinivalue_line("markers", "integration: Integration tests - component interaction tests")
    config.addinivalue_line("markers", "cli: Tests related to command-line interface")
    config.addinivalue_line("markers", "property: Property-based tests using Hypothesis")


SAMPLE_MARKDOWN = """# Project Notes

Intro with **bold**, *italic* and `code`.

- first
- second
    1. nested one
    2. nested two

> A quote with a [link](https://example.com/a)

---

| a | b |

```python
print("hi")
```

See [again](https://example.com/a) and ![diagram](img/d.png).
"""


@pytest.fixture
def sample_markdown() -> str:
    """Markdown exercising every line kind."""
    return SAMPLE_MARKDOWN


@pytest.fixture
def sample_document(sample_markdown: str) -> Document:
    """Parsed :data:`SAMPLE_MARKDOWN`."""
    return parse_markdown(sample_markdown, source_name="notes.md")


@pytest.fixture
def markdown_file(tmp_path: Path, sample_markdown: str) -> Path:
    """Sample Markdown written to a temporary UTF-8 file."""
    path = tmp_path / "notes.md"
    path.write_text(sample_markdown, encoding="utf-8")
    return path
