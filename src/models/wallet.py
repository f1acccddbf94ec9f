# src/models/wallet.py
from decimal import Decimal
from enum import Enum
from typing import List
from pydantic import BaseModel, ConfigDict, Field, field_validator
from .base import TimeStampedModel

class TransactionType(str, Enum):
    FUND = "fund"
    WITHDRAW = "withdraw"

class Transaction(TimeStampedModel):
    """Immutable record of a single wallet movement"""
    id: str
    type: TransactionType
    amount: Decimal
    description: str
    
    model_config = ConfigDict(from_attributes=True, frozen=True)

    @field_validator("amount")
    @classmethod
    def amount_must_be_positive(cls, value: Decimal) -> Decimal:
        if value <= 0:
            raise ValueError("transaction amount must be positive")
        return value

    @property
    def sign(self) -> str:
        return "+" if self.type == TransactionType.FUND else "-"

class Wallet(BaseModel):
    """Wallet model for user balance and history (newest first)"""
    user_id: int
    balance: Decimal = Decimal(0)
    transactions: List[Transaction] = Field(default_factory=list)

class OperationResult(BaseModel):
    """Outcome of a fund or withdraw request"""
    success: bool
    new_balance: Decimal
    message: str
