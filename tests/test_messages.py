from datetime import datetime
from decimal import Decimal

import pytz

from src.models.wallet import Transaction, TransactionType
from src.utils.formatters import format_datetime, format_price
from src.utils.messages import Messages


def test_format_price_two_decimals():
    assert format_price(Decimal("5")) == "$5.00"
    assert format_price(Decimal("1234.5")) == "$1234.50"
    assert format_price(Decimal("0.125")) == "$0.12"


def test_format_datetime_naive_is_utc():
    assert format_datetime(datetime(2024, 3, 1, 9, 5, 7)) == "2024-03-01 at 09:05:07"


def test_format_transaction_withdraw():
    tx = Transaction(
        id="1",
        type=TransactionType.WITHDRAW,
        amount=Decimal("12.5"),
        description="Withdrew $12.50 from wallet",
        timestamp=datetime(2024, 3, 1, 9, 5, tzinfo=pytz.utc),
    )
    assert Messages.format_transaction(tx) == (
        "💸 -$12.50\n"
        "   Withdrew $12.50 from wallet\n"
        "   2024-03-01 at 09:05:00\n"
    )


def test_result_decoration_keeps_message():
    assert Messages.result(True, "done") == "✅ done"
    assert Messages.result(False, "insufficient funds") == "❌ insufficient funds"
