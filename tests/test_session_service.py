from datetime import timedelta

from src.models.session import PendingAction


def test_no_session_by_default(session_service):
    assert session_service.get_pending_action(1) is None


def test_set_and_get_round_trip(session_service):
    session_service.set_pending_action(1, "fund")
    assert session_service.get_pending_action(1) == PendingAction.FUND


def test_clear_removes_session(session_service):
    session_service.set_pending_action(1, PendingAction.WITHDRAW)
    session_service.clear_pending_action(1)
    assert session_service.get_pending_action(1) is None


def test_clear_missing_session_is_noop(session_service):
    session_service.clear_pending_action(99)
    assert session_service.sessions == {}


def test_set_overwrites_previous_action(session_service):
    session_service.set_pending_action(1, PendingAction.FUND)
    session_service.set_pending_action(1, PendingAction.WITHDRAW)
    assert session_service.get_pending_action(1) == PendingAction.WITHDRAW
    assert len(session_service.sessions) == 1


def test_session_valid_at_timeout_boundary(session_service, clock):
    session_service.set_pending_action(1, PendingAction.FUND)
    clock.advance(minutes=5)
    assert session_service.get_pending_action(1) == PendingAction.FUND


def test_expired_session_is_erased_on_read(session_service, clock):
    session_service.set_pending_action(1, PendingAction.FUND)
    clock.advance(minutes=5, seconds=1)

    assert 1 in session_service.sessions
    assert session_service.get_pending_action(1) is None
    assert 1 not in session_service.sessions
    assert session_service.get_pending_action(1) is None


def test_overwrite_refreshes_timestamp(session_service, clock):
    session_service.set_pending_action(1, PendingAction.FUND)
    clock.advance(minutes=4)
    session_service.set_pending_action(1, PendingAction.WITHDRAW)
    clock.advance(minutes=4)
    assert session_service.get_pending_action(1) == PendingAction.WITHDRAW


def test_custom_timeout(clock):
    from src.services.session_service import SessionService

    service = SessionService(timeout=timedelta(seconds=30), clock=clock)
    service.set_pending_action(1, PendingAction.FUND)
    clock.advance(seconds=31)
    assert service.get_pending_action(1) is None


def test_sessions_are_per_user(session_service):
    session_service.set_pending_action(1, PendingAction.FUND)
    assert session_service.get_pending_action(2) is None
