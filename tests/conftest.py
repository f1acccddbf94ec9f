from datetime import datetime, timedelta
from decimal import Decimal
from types import SimpleNamespace
from unittest.mock import AsyncMock, MagicMock

import pytest
import pytz

from src.config import Config
from src.handlers.wallet_handler import WalletHandler
from src.services.session_service import SessionService
from src.services.wallet_service import WalletService


class FakeClock:
    """Manually advanced UTC clock"""

    def __init__(self):
        self.now = datetime(2024, 1, 1, 12, 0, tzinfo=pytz.utc)

    def __call__(self):
        return self.now

    def advance(self, **kwargs):
        self.now += timedelta(**kwargs)


@pytest.fixture(autouse=True)
def fixed_settings(monkeypatch):
    monkeypatch.setattr(Config, "TIMEZONE", "UTC")
    monkeypatch.setattr(Config, "MAX_FUND_AMOUNT", Decimal("10000"))
    monkeypatch.setattr(Config, "TRANSACTIONS_LIMIT", 5)


@pytest.fixture
def wallet_service():
    return WalletService()


@pytest.fixture
def clock():
    return FakeClock()


@pytest.fixture
def session_service(clock):
    return SessionService(timeout=timedelta(minutes=5), clock=clock)


@pytest.fixture
def handler(wallet_service, session_service):
    return WalletHandler(wallet_service, session_service)


def make_update(text="", user_id=42):
    update = MagicMock()
    update.effective_user = SimpleNamespace(id=user_id) if user_id else None
    update.message.text = text
    update.message.reply_text = AsyncMock()
    return update


def make_context(*args):
    return SimpleNamespace(args=list(args), error=None)


def last_reply(update):
    return update.message.reply_text.await_args.args[0]
