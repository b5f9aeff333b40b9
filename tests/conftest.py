from __future__ import annotations

import sys
from collections.abc import Iterator
from pathlib import Path

import pytest

# Ensure the src/ directory is importable when tests run via `uv run pytest`.
sys.path.append(str(Path(__file__).resolve().parents[1] / "src"))

from prismic_models import reset_client  # noqa: E402


@pytest.fixture(autouse=True)
def _reset_default_client() -> Iterator[None]:
    yield
    reset_client()
