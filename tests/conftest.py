from __future__ import annotations

import pytest

from reddit_summarizer.config import Settings
from tests.fakes import make_settings


@pytest.fixture
def test_settings() -> Settings:
    return make_settings()
