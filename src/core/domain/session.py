"""Sesión autenticada contra el backend.

Por qué un lock propio:
- Varias operaciones pueden compartir la misma sesión desde hilos distintos.
- El cliente lee la sesión para armar headers y reescribe el refresh token
  después de cada respuesta; ambas cosas pasan con el lock tomado.
"""

from __future__ import annotations

import threading
from dataclasses import dataclass, field

from core.domain.models import LoggedInUser


@dataclass
class Session:
    global_account_subdomain: str = ""
    identity_provider: str = ""
    logged_in_user: LoggedInUser | None = None
    refresh_token: str = ""
    _lock: threading.Lock = field(default_factory=threading.Lock, init=False, repr=False, compare=False)

    def lock(self) -> None:
        self._lock.acquire()

    def unlock(self) -> None:
        self._lock.release()

    def __enter__(self) -> Session:
        self.lock()
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.unlock()
