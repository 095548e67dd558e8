"""Shared data models for the endpoint probe engine."""

from dataclasses import dataclass
from enum import Enum
from typing import Optional

MAX_IPV4 = 2 ** 32 - 1


class Scheme(str, Enum):
    HTTP = "http"
    HTTPS = "https"


class ProbeStatus(str, Enum):
    OPEN = "OPEN"
    CLOSED = "CLOSED"
    SSL_ANOMALY = "SSL_ANOMALY"     # TLS error on HTTPS, endpoint most likely alive


class Action(str, Enum):
    REDIRECT = "REDIRECT"
    SUPPRESS = "SUPPRESS"


@dataclass(frozen=True)
class AddressRange:
    """Inclusive IPv4 range stored as 32-bit integers."""
    low: int
    high: int

    def __post_init__(self):
        for bound in (self.low, self.high):
            if not 0 <= bound <= MAX_IPV4:
                raise ValueError(f"IPv4 bound out of range: {bound}")
        if self.low > self.high:
            raise ValueError(f"Invalid range: low {self.low} > high {self.high}")

    def contains(self, value: int) -> bool:
        return self.low <= value <= self.high


@dataclass(frozen=True)
class CandidateSpec:
    """One (port, scheme) combination to probe."""
    port: int
    scheme: Scheme

    def __post_init__(self):
        if not 1 <= self.port <= 65535:
            raise ValueError(f"Invalid port: {self.port}")

    def url_for(self, hostname: str) -> str:
        return f"{self.scheme.value}://{hostname}:{self.port}"

    def __str__(self):
        return f"{self.port}/{self.scheme.value}"


@dataclass(frozen=True)
class ProbeOutcome:
    """Classified result of a single probe."""
    url: str
    scheme: Scheme
    port: int
    status: ProbeStatus

    @property
    def reachable(self) -> bool:
        return self.status is not ProbeStatus.CLOSED

    def __str__(self):
        return f"{self.url} [{self.status.value}]"


@dataclass(frozen=True)
class ScoredOutcome:
    outcome: ProbeOutcome
    score: int

    @property
    def url(self) -> str:
        return self.outcome.url

    @property
    def status(self) -> ProbeStatus:
        return self.outcome.status


@dataclass(frozen=True)
class Decision:
    """What the redirect gate wants done with a navigation."""
    action: Action
    url: Optional[str] = None
    reason: str = ""

    @classmethod
    def redirect(cls, url: str) -> "Decision":
        return cls(Action.REDIRECT, url=url, reason="better endpoint found")

    @classmethod
    def suppress(cls, reason: str) -> "Decision":
        return cls(Action.SUPPRESS, reason=reason)

    @property
    def redirects(self) -> bool:
        return self.action is Action.REDIRECT


@dataclass(frozen=True)
class NavigationEvent:
    """A navigation attempt reported by the host."""
    nav_context: str
    url: str
    frame_id: int = 0

    @property
    def is_main_frame(self) -> bool:
        return self.frame_id == 0
