"""States of a /void lookup."""

from enum import Enum


class LookupState(Enum):
    RECEIVED = "received"
    COOLDOWN = "cooldown"
    DEFERRED = "deferred"
    NOT_FOUND = "not_found"
    FAILED = "failed"
    INTERACTIVE = "interactive"
    EXPIRED = "expired"
