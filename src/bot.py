# src/bot.py
import logging
from datetime import timedelta
from typing import Optional
from telegram import Update
from telegram.ext import Application
from .config import Config
from .handlers import (
    WalletHandler,
    CommandHandler,
    MessageHandler,
    filters
)
from .services.wallet_service import WalletService
from .services.session_service import SessionService

class WalletBot:
    def __init__(self, token: Optional[str] = None):
        """Build the application and the in-memory stores"""
        self.logger = logging.getLogger(__name__)
        # stores live for the whole process
        self.wallet_service = WalletService()
        self.session_service = SessionService(
            timeout=timedelta(minutes=Config.SESSION_TIMEOUT_MINUTES)
        )
        self.wallet_handler = WalletHandler(self.wallet_service, self.session_service)
        self.application = Application.builder().token(token or Config.TELEGRAM_TOKEN).build()
        self.setup_handlers()

    def setup_handlers(self):
        """Register bot handlers"""
        handler = self.wallet_handler
        self.application.add_handler(CommandHandler("start", handler.start))
        self.application.add_handler(CommandHandler("help", handler.help))
        self.application.add_handler(CommandHandler("balance", handler.balance))
        self.application.add_handler(CommandHandler("fund", handler.fund))
        self.application.add_handler(CommandHandler("withdraw", handler.withdraw))
        self.application.add_handler(CommandHandler("transactions", handler.transactions))

        # free text for interactive amounts
        self.application.add_handler(
            MessageHandler(
                filters.TEXT & ~filters.COMMAND,
                handler.handle_message
            )
        )

        self.application.add_error_handler(handler.error_handler)

    def run(self):
        """Start polling until interrupted"""
        self.logger.info("Wallet Bot is running")
        self.application.run_polling(allowed_updates=Update.ALL_TYPES)
