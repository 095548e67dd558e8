"""Redirect decision and loop suppression."""

import time
from typing import Callable, Dict, Optional

from lanprobe.core.config import LOCK_COOLDOWN
from lanprobe.core.models import Decision, ScoredOutcome, Scheme


class RedirectLock:
    """
    Lock key -> expiry timestamp. Expired keys are dropped lazily on
    access; nothing runs in the background.
    """

    def __init__(self, cooldown: float = LOCK_COOLDOWN,
                 clock: Callable[[], float] = time.monotonic):
        self.cooldown = cooldown
        self.clock = clock
        self._expiry: Dict[str, float] = {}

    def is_locked(self, key: str) -> bool:
        expires = self._expiry.get(key)
        if expires is None:
            return False
        if expires > self.clock():
            return True
        del self._expiry[key]
        return False

    def lock(self, key: str):
        # drop keys whose tab never came back
        self.sweep()
        self._expiry[key] = self.clock() + self.cooldown

    # a locked key hit again gets a fresh cooldown
    refresh = lock

    def release(self, key: str):
        self._expiry.pop(key, None)

    def sweep(self) -> int:
        now = self.clock()
        stale = [k for k, exp in self._expiry.items() if exp <= now]
        for k in stale:
            del self._expiry[k]
        return len(stale)

    def __len__(self):
        return len(self._expiry)

    def __contains__(self, key: str):
        return self.is_locked(key)


def is_default_scheme(scheme: str, port: Optional[int]) -> bool:
    """Plain http on port 80 (explicit or implied)."""
    return scheme == Scheme.HTTP.value and port in (None, 80)


class RedirectGate:
    def __init__(self, lock: Optional[RedirectLock] = None, logger=None):
        self.lock = lock if lock is not None else RedirectLock()
        self.logger = logger

    @staticmethod
    def lock_key(nav_context: str, hostname: str) -> str:
        return f"{nav_context}-{hostname}"

    def admit(self, nav_context: str, hostname: str,
              scheme: str, port: Optional[int]) -> Optional[Decision]:
        """Pre-scan check. None means the host may be scanned."""
        key = self.lock_key(nav_context, hostname)
        if self.lock.is_locked(key):
            self.lock.refresh(key)
            return self._log(nav_context, hostname, Decision.suppress("redirect cooldown active"))

        # user already picked an explicit endpoint
        if not is_default_scheme(scheme, port) and scheme != Scheme.HTTP.value:
            return self._log(nav_context, hostname, Decision.suppress("explicit endpoint requested"))
        return None

    def decide(self, nav_context: str, hostname: str, current_url: str,
               current_scheme: str, current_port: Optional[int],
               best: Optional[ScoredOutcome]) -> Decision:
        # no await between the lock check and lock() below
        early = self.admit(nav_context, hostname, current_scheme, current_port)
        if early is not None:
            return early
        if best is None:
            return self._log(nav_context, hostname, Decision.suppress("no reachable endpoint"))
        if current_url.startswith(best.url):
            return self._log(nav_context, hostname, Decision.suppress("already on best endpoint"))

        self.lock.lock(self.lock_key(nav_context, hostname))
        return self._log(nav_context, hostname, Decision.redirect(best.url))

    def _log(self, nav_context: str, hostname: str, decision: Decision) -> Decision:
        if self.logger:
            self.logger.decision(str(nav_context), hostname, decision.action.value, decision.reason)
        return decision
