# src/utils/formatters.py
from datetime import datetime
import pytz
from decimal import Decimal
from ..config import Config

def format_price(amount: Decimal) -> str:
    """Money with exactly two decimal places"""
    return f"${amount:.2f}"

def format_datetime(dt: datetime) -> str:
    """Date and time in the configured timezone"""
    local_tz = pytz.timezone(Config.TIMEZONE)
    if dt.tzinfo is None:
        dt = pytz.utc.localize(dt)
    local_time = dt.astimezone(local_tz)
    return local_time.strftime("%Y-%m-%d at %H:%M:%S")
