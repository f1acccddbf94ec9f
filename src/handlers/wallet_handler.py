# src/handlers/wallet_handler.py
from decimal import Decimal
from telegram import Update
from telegram.ext import ContextTypes
from .base_handler import BaseHandler
from ..config import Config
from ..models.session import PendingAction
from ..models.wallet import OperationResult

UNKNOWN_USER_TEXT = "❌ Unable to identify user."

class WalletHandler(BaseHandler):
    """Wallet commands and the interactive amount flow"""

    async def start(self, update: Update, context: ContextTypes.DEFAULT_TYPE):
        """/start command"""
        await update.message.reply_text(self.messages.welcome())

    async def help(self, update: Update, context: ContextTypes.DEFAULT_TYPE):
        """/help command"""
        await update.message.reply_text(self.messages.help())

    async def balance(self, update: Update, context: ContextTypes.DEFAULT_TYPE):
        """/balance command"""
        user_id = self.get_user_id(update)
        if not user_id:
            await update.message.reply_text(UNKNOWN_USER_TEXT)
            return

        try:
            balance = self.wallet_service.get_balance(user_id)
            await update.message.reply_text(self.messages.balance(balance))
        except Exception as e:
            self.logger.error(f"Error in balance command: {e}", exc_info=True)
            await update.message.reply_text("❌ An error occurred while checking your balance.")

    async def fund(self, update: Update, context: ContextTypes.DEFAULT_TYPE):
        """/fund [amount] command"""
        user_id = self.get_user_id(update)
        if not user_id:
            await update.message.reply_text(UNKNOWN_USER_TEXT)
            return

        try:
            if not context.args:
                # no amount, ask for it
                self.session_service.set_pending_action(user_id, PendingAction.FUND)
                await update.message.reply_text(self.messages.fund_prompt())
                return

            amount = self.parse_amount(context.args[0])
            if amount is None:
                await update.message.reply_text(
                    "❌ Please enter a valid positive amount.\nExample: /fund 50"
                )
                return

            if amount > Config.MAX_FUND_AMOUNT:
                await update.message.reply_text(self.messages.max_fund_exceeded())
                return

            result = self.wallet_service.fund(user_id, amount)
            await self._reply_result(update, result)
        except Exception as e:
            self.logger.error(f"Error in fund command: {e}", exc_info=True)
            await update.message.reply_text("❌ An error occurred while funding your wallet.")

    async def withdraw(self, update: Update, context: ContextTypes.DEFAULT_TYPE):
        """/withdraw [amount] command"""
        user_id = self.get_user_id(update)
        if not user_id:
            await update.message.reply_text(UNKNOWN_USER_TEXT)
            return

        try:
            if not context.args:
                current_balance = self.wallet_service.get_balance(user_id)
                self.session_service.set_pending_action(user_id, PendingAction.WITHDRAW)
                await update.message.reply_text(self.messages.withdraw_prompt(current_balance))
                return

            amount = self.parse_amount(context.args[0])
            if amount is None:
                await update.message.reply_text(
                    "❌ Please enter a valid positive amount.\nExample: /withdraw 25"
                )
                return

            result = self.wallet_service.withdraw(user_id, amount)
            await self._reply_result(update, result)
        except Exception as e:
            self.logger.error(f"Error in withdraw command: {e}", exc_info=True)
            await update.message.reply_text("❌ An error occurred while processing your withdrawal.")

    async def transactions(self, update: Update, context: ContextTypes.DEFAULT_TYPE):
        """/transactions command"""
        user_id = self.get_user_id(update)
        if not user_id:
            await update.message.reply_text(UNKNOWN_USER_TEXT)
            return

        try:
            transactions = self.wallet_service.get_transactions(
                user_id, Config.TRANSACTIONS_LIMIT
            )
            await update.message.reply_text(self.messages.transactions(transactions))
        except Exception as e:
            self.logger.error(f"Error in transactions command: {e}", exc_info=True)
            await update.message.reply_text("❌ An error occurred while fetching your transactions.")

    async def handle_message(self, update: Update, context: ContextTypes.DEFAULT_TYPE):
        """Free text: an amount for a pending action, otherwise help"""
        user_id = self.get_user_id(update)
        if not user_id:
            await update.message.reply_text(UNKNOWN_USER_TEXT)
            return

        text = update.message.text or ""
        if text.startswith("/"):
            return

        pending_action = self.session_service.get_pending_action(user_id)
        if pending_action is None:
            await update.message.reply_text(self.messages.help())
            return

        amount = self.parse_amount(text)
        if amount is None:
            await update.message.reply_text(
                "❌ Please enter a valid positive number.\nExample: 50 or 100.25"
            )
            return

        if pending_action == PendingAction.FUND:
            if amount > Config.MAX_FUND_AMOUNT:
                await update.message.reply_text(
                    f"{self.messages.max_fund_exceeded()}\nPlease enter a smaller amount:"
                )
                return
            result = self.wallet_service.fund(user_id, amount)
        else:
            result = self.wallet_service.withdraw(user_id, amount)

        # consumed whether or not the operation succeeded
        self.session_service.clear_pending_action(user_id)
        await self._reply_result(update, result)

    async def _reply_result(self, update: Update, result: OperationResult):
        await update.message.reply_text(
            self.messages.result(result.success, result.message)
        )
