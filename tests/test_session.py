"""core/domain/session.py"""

from __future__ import annotations

import threading

from core.domain.models import LoggedInUser
from core.domain.session import Session


class TestSession:
    """Sesión con lock propio"""

    def test_defaults(self):
        session = Session()
        assert session.global_account_subdomain == ""
        assert session.logged_in_user is None
        assert session.refresh_token == ""

    def test_context_manager_holds_lock(self):
        session = Session(refresh_token="a")
        with session:
            assert session._lock.locked()
        assert not session._lock.locked()

    def test_explicit_lock_unlock(self):
        session = Session()
        session.lock()
        try:
            assert session._lock.acquire(blocking=False) is False
        finally:
            session.unlock()
        assert session._lock.acquire(blocking=False) is True
        session.unlock()

    def test_concurrent_updates_are_serialized(self):
        """Con el lock tomado no se pierden escrituras"""
        session = Session(refresh_token="0")

        def bump() -> None:
            for _ in range(200):
                with session:
                    session.refresh_token = str(int(session.refresh_token) + 1)

        threads = [threading.Thread(target=bump) for _ in range(4)]
        for t in threads:
            t.start()
        for t in threads:
            t.join()

        assert session.refresh_token == "800"

    def test_equality_ignores_lock(self):
        user = LoggedInUser(username="u")
        assert Session("ga", "", user, "t") == Session("ga", "", user, "t")
