# src/handlers/base_handler.py
import logging
from decimal import Decimal, InvalidOperation
from typing import Optional
from telegram import Update
from telegram.ext import ContextTypes
from ..services.wallet_service import WalletService
from ..services.session_service import SessionService
from ..utils.messages import Messages

class BaseHandler:
    """Base class for handlers"""
    def __init__(self, wallet_service: WalletService, session_service: SessionService):
        self.wallet_service = wallet_service
        self.session_service = session_service
        self.messages = Messages()
        self.logger = logging.getLogger(self.__class__.__module__)

    @staticmethod
    def get_user_id(update: Update) -> Optional[int]:
        """Telegram id of the sender, if any"""
        user = update.effective_user
        return user.id if user else None

    @staticmethod
    def parse_amount(text: str) -> Optional[Decimal]:
        """Parse a positive finite amount, None when invalid"""
        try:
            amount = Decimal(text.strip())
        except (InvalidOperation, ValueError):
            return None
        if not amount.is_finite() or amount <= 0:
            return None
        return amount

    async def error_handler(self, update: object, context: ContextTypes.DEFAULT_TYPE):
        """Log errors that escaped the handlers and tell the user"""
        self.logger.error("Bot error", exc_info=context.error)
        if isinstance(update, Update) and update.effective_message:
            await update.effective_message.reply_text(
                "❌ An unexpected error occurred. Please try again."
            )
