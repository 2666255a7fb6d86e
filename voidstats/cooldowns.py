"""Per-user command cooldowns."""

import time
from typing import Callable, Dict, Iterable

COOLDOWN_SECONDS = 3.0


class CooldownTracker:
    """
    Rate limits each user to one command every ``seconds`` seconds.

    Privileged users are never limited and never recorded. Records of other
    users are kept for the lifetime of the process.
    """

    def __init__(
        self,
        seconds: float = COOLDOWN_SECONDS,
        privileged: Iterable[int] = (),
        clock: Callable[[], float] = time.monotonic,
    ) -> None:
        self.seconds = seconds
        self.privileged = frozenset(privileged)
        self._clock = clock
        self._last_used: Dict[int, float] = {}

    def is_privileged(self, user_id: int) -> bool:
        return user_id in self.privileged

    def check(self, user_id: int) -> float:
        """
        Register a command use.

        Returns:
            0.0 if the use is allowed (and now recorded), otherwise the
            seconds left before the user may run a command again.
        """
        if self.is_privileged(user_id):
            return 0.0
        now = self._clock()
        last = self._last_used.get(user_id)
        if last is not None:
            elapsed = now - last
            if elapsed < self.seconds:
                return self.seconds - elapsed
        self._last_used[user_id] = now
        return 0.0
