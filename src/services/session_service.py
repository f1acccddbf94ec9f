# src/services/session_service.py
import logging
from datetime import datetime, timedelta
from typing import Callable, Dict, Optional, Union
from ..models.base import utc_now
from ..models.session import PendingAction, Session

DEFAULT_SESSION_TIMEOUT = timedelta(minutes=5)

class SessionService:
    """Tracks pending interactive actions per user.

    A session is created when a user sends /fund or /withdraw without an
    amount. Expiry is checked lazily in ``get_pending_action``; stale
    sessions stay in ``sessions`` until read or overwritten.
    """

    def __init__(self, timeout: timedelta = DEFAULT_SESSION_TIMEOUT,
                 clock: Callable[[], datetime] = utc_now):
        self.sessions: Dict[int, Session] = {}
        self.timeout = timeout
        self.clock = clock
        self.logger = logging.getLogger(__name__)

    def set_pending_action(self, user_id: int, action: Union[PendingAction, str]):
        """Create or overwrite the user's pending action"""
        self.sessions[user_id] = Session(
            user_id=user_id,
            pending_action=PendingAction(action),
            timestamp=self.clock()
        )
        self.logger.debug(f"Pending {PendingAction(action).value} set for user {user_id}")

    def get_pending_action(self, user_id: int) -> Optional[PendingAction]:
        """Pending action for the user, or None if absent or expired"""
        session = self.sessions.get(user_id)
        if session is None:
            return None

        if self.clock() - session.timestamp > self.timeout:
            del self.sessions[user_id]
            self.logger.debug(f"Session for user {user_id} expired")
            return None

        return session.pending_action

    def clear_pending_action(self, user_id: int):
        """Remove the user's session if any"""
        self.sessions.pop(user_id, None)
