"""
Root conftest.py for all backend tests.

This file makes fixtures available to all test files across all apps.
"""
import pytest

from core_backend.tests.fixtures import *  # noqa: F401,F403


# ============================================================================
# AUTO-USE FIXTURES (Run automatically for every test)
# ============================================================================

@pytest.fixture(autouse=True)
def reset_app_settings():
    """
    Forget cached StoreSetting rows around each test.

    AppSettings is a process-wide singleton; rows cached by one test would
    otherwise leak into the next after its transaction is rolled back.
    """
    from settings.config import app_settings

    app_settings.invalidate()
    yield
    app_settings.invalidate()


@pytest.fixture(autouse=True)
def telegram_disabled(settings):
    """No test talks to the real Telegram API unless it sets a token itself."""
    settings.TELEGRAM_BOT_TOKEN = ''
