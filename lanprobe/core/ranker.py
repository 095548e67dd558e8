"""Scoring and ordering of reachable endpoints."""

from typing import Dict, Iterable, List, Optional

from lanprobe.core.config import PORT_PRIORITY, SCHEME_WEIGHTS, STATUS_WEIGHTS
from lanprobe.core.models import ProbeOutcome, ProbeStatus, Scheme, ScoredOutcome


class PriorityRanker:
    """
    Additive score: status + scheme + port priority.

    The status gap (OPEN 100 vs SSL_ANOMALY 50) is wider than anything the
    scheme and port terms can add, so a clean answer always beats an
    inferred one. Equal scores keep the order the outcomes came in.
    """

    def __init__(self,
                 status_weights: Optional[Dict[ProbeStatus, int]] = None,
                 scheme_weights: Optional[Dict[Scheme, int]] = None,
                 port_priority: Optional[Dict[int, int]] = None):
        self.status_weights = status_weights if status_weights is not None else STATUS_WEIGHTS
        self.scheme_weights = scheme_weights if scheme_weights is not None else SCHEME_WEIGHTS
        self.port_priority = port_priority if port_priority is not None else PORT_PRIORITY

    def score(self, outcome: ProbeOutcome) -> int:
        return (self.status_weights.get(outcome.status, 0)
                + self.scheme_weights.get(outcome.scheme, 0)
                + self.port_priority.get(outcome.port, 0))

    def rank(self, outcomes: Iterable[ProbeOutcome]) -> List[ScoredOutcome]:
        scored = [ScoredOutcome(o, self.score(o)) for o in outcomes if o.reachable]
        # sorted() is stable
        return sorted(scored, key=lambda s: s.score, reverse=True)

    def best(self, outcomes: Iterable[ProbeOutcome]) -> Optional[ScoredOutcome]:
        ranked = self.rank(outcomes)
        return ranked[0] if ranked else None
