# src/models/session.py
from enum import Enum
from .base import TimeStampedModel

class PendingAction(str, Enum):
    FUND = "fund"
    WITHDRAW = "withdraw"

class Session(TimeStampedModel):
    """Pending interactive action waiting for an amount"""
    user_id: int
    pending_action: PendingAction
