# src/handlers/__init__.py
"""Bot handlers"""
from telegram.ext import (
    CommandHandler,
    MessageHandler,
    filters
)
from .base_handler import BaseHandler
from .wallet_handler import WalletHandler

__all__ = [
    'BaseHandler',
    'WalletHandler',
    'CommandHandler',
    'MessageHandler',
    'filters'
]
