# src/utils/messages.py
from decimal import Decimal
from typing import List
from ..config import Config
from ..models.wallet import Transaction, TransactionType
from ..utils.formatters import format_price, format_datetime

COMMANDS_TEXT = (
    "💰 /balance - Check your current wallet balance\n"
    "💵 /fund <amount> or /fund - Add money to your wallet\n"
    "💸 /withdraw <amount> or /withdraw - Withdraw money from your wallet\n"
    "📊 /transactions - View your last 5 transactions\n"
)

class Messages:
    @staticmethod
    def welcome() -> str:
        return (
            "🎉 Welcome to Wallet Bot! 🎉\n\n"
            "I'm here to help you manage your virtual wallet. Here's what I can do:\n\n"
            f"{COMMANDS_TEXT}\n"
            "This is a simulation bot - no real money is involved!\n"
            "Just type any command to get started.\n\n"
            "Example: /fund 100"
        )

    @staticmethod
    def help() -> str:
        return (
            "❓ I didn't understand that command. Here are the available commands:\n\n"
            f"{COMMANDS_TEXT}\n"
            "Example: /fund 100 or just /fund"
        )

    @staticmethod
    def balance(balance: Decimal) -> str:
        return f"💰 Your wallet balance is {format_price(balance)}"

    @staticmethod
    def fund_prompt() -> str:
        return (
            "💵 How much would you like to fund your wallet?\n\n"
            "Please enter the amount (e.g., 50, 100.50):"
        )

    @staticmethod
    def withdraw_prompt(balance: Decimal) -> str:
        return (
            "💸 How much would you like to withdraw?\n\n"
            f"Your current balance: {format_price(balance)}\n"
            "Please enter the amount (e.g., 25, 50.75):"
        )

    @staticmethod
    def max_fund_exceeded() -> str:
        return f"❌ Maximum funding amount is ${Config.MAX_FUND_AMOUNT:,.0f} per transaction."

    @staticmethod
    def result(success: bool, message: str) -> str:
        """Decorate a ledger result message without altering it"""
        return f"{'✅' if success else '❌'} {message}"

    @staticmethod
    def format_transaction(transaction: Transaction) -> str:
        """One entry of the transactions list"""
        emoji = "💵" if transaction.type == TransactionType.FUND else "💸"
        return (
            f"{emoji} {transaction.sign}{format_price(transaction.amount)}\n"
            f"   {transaction.description}\n"
            f"   {format_datetime(transaction.timestamp)}\n"
        )

    @staticmethod
    def transactions(transactions: List[Transaction]) -> str:
        """Recent transactions, newest first"""
        if not transactions:
            return "📝 You have not made any transactions yet."

        text = f"📊 Your last {Config.TRANSACTIONS_LIMIT} transactions:\n\n"
        text += "\n".join(Messages.format_transaction(tx) for tx in transactions)
        return text
