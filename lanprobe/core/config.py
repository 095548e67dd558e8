"""Engine configuration and reference defaults."""

from dataclasses import dataclass, field, replace
from typing import Dict, Iterable, Optional, Tuple

from lanprobe.core.address import parse_range
from lanprobe.core.models import AddressRange, CandidateSpec, ProbeStatus, Scheme

SCAN_TIMEOUT = 1.2       # seconds, leaves room for a slow TLS handshake
LOCK_COOLDOWN = 5.0      # seconds

DEFAULT_RANGES: Tuple[AddressRange, ...] = (
    parse_range("100.60.0.0-100.80.0.0"),
    parse_range("5.197.0.0/16"),
)

DEFAULT_CANDIDATES: Tuple[CandidateSpec, ...] = (
    CandidateSpec(443, Scheme.HTTPS),
    CandidateSpec(8080, Scheme.HTTPS),
    CandidateSpec(8888, Scheme.HTTPS),
    CandidateSpec(8080, Scheme.HTTP),
    CandidateSpec(8888, Scheme.HTTP),
)

STATUS_WEIGHTS: Dict[ProbeStatus, int] = {
    ProbeStatus.OPEN: 100,
    ProbeStatus.SSL_ANOMALY: 50,
}

SCHEME_WEIGHTS: Dict[Scheme, int] = {
    Scheme.HTTPS: 10,
    Scheme.HTTP: 0,
}

PORT_PRIORITY: Dict[int, int] = {443: 3, 8080: 2, 8888: 1}


@dataclass(frozen=True)
class EngineConfig:
    ranges: Tuple[AddressRange, ...] = DEFAULT_RANGES
    candidates: Tuple[CandidateSpec, ...] = DEFAULT_CANDIDATES
    probe_timeout: float = SCAN_TIMEOUT
    cooldown: float = LOCK_COOLDOWN
    status_weights: Dict[ProbeStatus, int] = field(default_factory=lambda: dict(STATUS_WEIGHTS))
    scheme_weights: Dict[Scheme, int] = field(default_factory=lambda: dict(SCHEME_WEIGHTS))
    port_priority: Dict[int, int] = field(default_factory=lambda: dict(PORT_PRIORITY))
    verify_tls: bool = True
    proxy: Optional[str] = None

    def __post_init__(self):
        if self.probe_timeout <= 0:
            raise ValueError(f"probe_timeout must be positive, got {self.probe_timeout}")
        if self.cooldown < 0:
            raise ValueError(f"cooldown must not be negative, got {self.cooldown}")
        if not self.candidates:
            raise ValueError("At least one candidate endpoint is required.")
        # normalise lists passed by callers
        object.__setattr__(self, "ranges", tuple(self.ranges))
        object.__setattr__(self, "candidates", tuple(self.candidates))

    def with_ranges(self, specs: Iterable[str]) -> "EngineConfig":
        """Copy of this config targeting the given range strings."""
        return replace(self, ranges=tuple(parse_range(s) for s in specs))
