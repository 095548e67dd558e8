from typing import List, Optional
from urllib.parse import urlsplit

from lanprobe.core.address import AddressClassifier
from lanprobe.core.config import EngineConfig
from lanprobe.core.gate import RedirectGate, RedirectLock
from lanprobe.core.models import Decision, NavigationEvent, ProbeOutcome, ScoredOutcome
from lanprobe.core.probe import Connector, EndpointProbe, HttpxConnector
from lanprobe.core.ranker import PriorityRanker
from lanprobe.core.scanner import ScanOrchestrator
from lanprobe.hosts.base import NavigationHost


class Engine:
    def __init__(self, config: EngineConfig | None = None, host: NavigationHost | None = None,
                 connector: Connector | None = None, logger=None, lock: RedirectLock | None = None):
        self.name = "lanprobe"
        self.version = "1.0.0"
        self.config = config or EngineConfig()
        self.host = host
        self.logger = logger

        self._owns_connector = connector is None
        self.connector = connector if connector is not None else HttpxConnector(
            verify=self.config.verify_tls, proxy=self.config.proxy,
            timeout=self.config.probe_timeout)

        self.classifier = AddressClassifier(self.config.ranges)
        self.scanner = ScanOrchestrator(
            EndpointProbe(self.connector, self.config.probe_timeout, logger=logger),
            self.config.candidates, logger=logger)
        self.ranker = PriorityRanker(self.config.status_weights,
                                     self.config.scheme_weights,
                                     self.config.port_priority)
        self.gate = RedirectGate(lock if lock is not None else RedirectLock(self.config.cooldown),
                                 logger=logger)

    async def __aenter__(self):
        return self

    async def __aexit__(self, *exc):
        await self.aclose()

    async def aclose(self):
        if self._owns_connector:
            await self.connector.aclose()

    # ---------- host events ----------
    async def on_before_main_frame_navigate(self, nav_context, url: str,
                                            frame_id: int = 0) -> Optional[Decision]:
        return await self.dispatch(NavigationEvent(str(nav_context), url, frame_id))

    async def dispatch(self, event: NavigationEvent) -> Optional[Decision]:
        """
        Handle one navigation. Returns the gate's decision, or None when the
        event was ignored or failed. Errors never leave this method: the
        user just stays on the URL they asked for.
        """
        if not event.is_main_frame:
            return None
        try:
            return await self._handle(str(event.nav_context), event.url)
        except ValueError as exc:
            if self.logger:
                self.logger.warn(f"Malformed navigation URL {event.url!r}: {exc}")
        except Exception as exc:
            if self.logger:
                self.logger.fail(f"Navigation {event.nav_context} aborted: {exc!r}")
        return None

    async def _handle(self, nav_context: str, url: str) -> Optional[Decision]:
        parts = urlsplit(url)
        hostname = parts.hostname or ""
        if not self.classifier.is_target_address(hostname):
            return None

        port = parts.port
        early = self.gate.admit(nav_context, hostname, parts.scheme, port)
        if early is not None:
            return early

        if self.logger:
            self.logger.info(f"Scanning interfaces for {hostname}...")
        best = self.ranker.best(await self._scan(hostname))
        if best is None and self.logger:
            self.logger.info("No active interfaces found.")

        decision = self.gate.decide(nav_context, hostname, url, parts.scheme, port, best)
        if decision.redirects:
            if self.logger:
                self.logger.info(f"Redirecting to best interface: {decision.url} "
                                 f"(Status: {best.status.value})")
            if self.host:
                self.host.set_navigation_target(nav_context, decision.url)
        return decision

    # ---------- scanning ----------
    async def scan_host(self, hostname: str) -> List[ScoredOutcome]:
        return self.ranker.rank(await self._scan(hostname))

    async def _scan(self, hostname: str) -> List[ProbeOutcome]:
        outcomes = await self.scanner.scan(hostname)
        if self.logger:
            for o in outcomes:
                if not o.reachable:
                    self.logger.debug(f"{o.url} closed")
        return outcomes
