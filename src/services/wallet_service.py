# src/services/wallet_service.py
import itertools
import logging
import secrets
import time
from decimal import Decimal, InvalidOperation
from typing import Dict, List, Optional, Union
from ..models.wallet import OperationResult, Transaction, TransactionType, Wallet

Amount = Union[Decimal, int, float]

INVALID_AMOUNT_MESSAGE = "amount must be greater than 0"
INSUFFICIENT_FUNDS_MESSAGE = "insufficient funds"

def to_decimal(amount: Amount) -> Optional[Decimal]:
    """Finite positive Decimal for an already-parsed amount, None otherwise"""
    try:
        value = amount if isinstance(amount, Decimal) else Decimal(str(amount))
    except (InvalidOperation, ValueError, TypeError):
        return None
    if not value.is_finite() or value <= 0:
        return None
    return value

class WalletService:
    """In-memory ledger of per-user wallets.

    Wallets are created lazily by ``get_or_create_wallet`` the first time a
    user id is seen and live for the lifetime of the service instance. Only
    ``fund`` and ``withdraw`` mutate a wallet; validation failures come back
    as an unsuccessful ``OperationResult`` and are never raised.
    """
    
    def __init__(self):
        self.wallets: Dict[int, Wallet] = {}
        self._sequence = itertools.count(1)
        self.logger = logging.getLogger(__name__)

    def _generate_transaction_id(self) -> str:
        """Build a unique id from wall-clock millis, a sequence and random hex"""
        millis = int(time.time() * 1000)
        return f"{millis}-{next(self._sequence):06d}-{secrets.token_hex(4)}"

    def get_or_create_wallet(self, user_id: int) -> Wallet:
        """Return the user's wallet, inserting an empty one if missing"""
        wallet = self.wallets.get(user_id)
        if wallet is None:
            wallet = Wallet(user_id=user_id)
            self.wallets[user_id] = wallet
            self.logger.debug(f"Created wallet for user {user_id}")
        return wallet

    def get_balance(self, user_id: int) -> Decimal:
        """Current wallet balance"""
        return self.get_or_create_wallet(user_id).balance

    def fund(self, user_id: int, amount: Amount) -> OperationResult:
        """Add funds to the wallet"""
        value = to_decimal(amount)
        wallet = self.get_or_create_wallet(user_id)

        if value is None:
            self.logger.warning(f"Rejected fund of {amount!r} for user {user_id}")
            return OperationResult(
                success=False,
                new_balance=wallet.balance,
                message=INVALID_AMOUNT_MESSAGE
            )

        self._apply(wallet, TransactionType.FUND, value,
                    f"Wallet funded with ${value:.2f}")
        self.logger.info(f"User {user_id} funded {value:.2f}, balance {wallet.balance:.2f}")

        return OperationResult(
            success=True,
            new_balance=wallet.balance,
            message=f"Wallet funded with ${value:.2f}. New balance: ${wallet.balance:.2f}"
        )

    def withdraw(self, user_id: int, amount: Amount) -> OperationResult:
        """Withdraw funds, bounded by the current balance"""
        value = to_decimal(amount)
        wallet = self.get_or_create_wallet(user_id)

        if value is None:
            self.logger.warning(f"Rejected withdrawal of {amount!r} for user {user_id}")
            return OperationResult(
                success=False,
                new_balance=wallet.balance,
                message=INVALID_AMOUNT_MESSAGE
            )

        if value > wallet.balance:
            self.logger.warning(
                f"Insufficient funds for user {user_id}: "
                f"requested {value:.2f}, balance {wallet.balance:.2f}"
            )
            return OperationResult(
                success=False,
                new_balance=wallet.balance,
                message=INSUFFICIENT_FUNDS_MESSAGE
            )

        self._apply(wallet, TransactionType.WITHDRAW, value,
                    f"Withdrew ${value:.2f} from wallet")
        self.logger.info(f"User {user_id} withdrew {value:.2f}, balance {wallet.balance:.2f}")

        return OperationResult(
            success=True,
            new_balance=wallet.balance,
            message=f"Successfully withdrew ${value:.2f}. New balance: ${wallet.balance:.2f}"
        )

    def get_transactions(self, user_id: int, limit: int = 5) -> List[Transaction]:
        """Most recent transactions, newest first"""
        wallet = self.get_or_create_wallet(user_id)
        if limit <= 0:
            return []
        return list(wallet.transactions[:limit])

    def _apply(self, wallet: Wallet, tx_type: TransactionType,
               amount: Decimal, description: str) -> Transaction:
        # record is built first so a rejected record leaves the wallet untouched
        transaction = Transaction(
            id=self._generate_transaction_id(),
            type=tx_type,
            amount=amount,
            description=description
        )
        if tx_type == TransactionType.FUND:
            wallet.balance += amount
        else:
            wallet.balance -= amount
        # newest first
        wallet.transactions.insert(0, transaction)
        return transaction
