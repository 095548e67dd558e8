"""Concurrent fan-out of endpoint probes against one host."""

import asyncio
from typing import Iterable, List, Optional

from lanprobe.core.config import DEFAULT_CANDIDATES
from lanprobe.core.models import CandidateSpec, ProbeOutcome, ProbeStatus
from lanprobe.core.probe import EndpointProbe


class ScanOrchestrator:
    def __init__(self, probe: EndpointProbe,
                 candidates: Iterable[CandidateSpec] = DEFAULT_CANDIDATES, logger=None):
        self.probe = probe
        self.candidates = tuple(candidates)
        self.logger = logger

    async def scan(self, hostname: str,
                   candidates: Optional[Iterable[CandidateSpec]] = None) -> List[ProbeOutcome]:
        """
        Probe every candidate concurrently and wait for all of them.
        A later, better endpoint must not lose to an earlier one that
        answered first, so there is no short-circuit on success.
        """
        specs = tuple(candidates) if candidates is not None else self.candidates
        tasks = [asyncio.ensure_future(self._settle(hostname, c)) for c in specs]
        return list(await asyncio.gather(*tasks))

    async def _settle(self, hostname: str, candidate: CandidateSpec) -> ProbeOutcome:
        try:
            return await self.probe.probe(hostname, candidate)
        except Exception as exc:
            if self.logger:
                self.logger.debug(f"Probe {candidate} on {hostname} failed unexpectedly: {exc!r}")
            return ProbeOutcome(url=candidate.url_for(hostname), scheme=candidate.scheme,
                                port=candidate.port, status=ProbeStatus.CLOSED)
