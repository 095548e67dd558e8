"""Single endpoint probe with a hard deadline."""

import asyncio
from typing import Any, Awaitable, Callable

import httpx

from lanprobe.core.config import SCAN_TIMEOUT
from lanprobe.core.models import CandidateSpec, ProbeOutcome, ProbeStatus, Scheme

# raises on failure: httpx errors or OSError (ssl.SSLError included)
Connector = Callable[[str], Awaitable[Any]]

_NO_CACHE_HDRS = {"Cache-Control": "no-cache", "Pragma": "no-cache"}


class HttpxConnector:
    """
    Network primitive backed by httpx.AsyncClient.

    Sends one HEAD request per call and never reads a body; only the
    connection and TLS handshake matter. Redirects are not followed.
    """

    def __init__(self, verify: bool = True, proxy: str | None = None,
                 timeout: float = SCAN_TIMEOUT, transport: httpx.AsyncBaseTransport | None = None):
        self.client = httpx.AsyncClient(
            verify=verify, proxy=proxy, follow_redirects=False,
            timeout=timeout, transport=transport)

    async def __call__(self, url: str) -> httpx.Response:
        return await self.client.request("HEAD", url, headers=_NO_CACHE_HDRS)

    async def aclose(self):
        await self.client.aclose()


class EndpointProbe:
    def __init__(self, connector: Connector, timeout: float = SCAN_TIMEOUT, logger=None):
        self.connector = connector
        self.timeout = timeout
        self.logger = logger

    async def probe(self, hostname: str, candidate: CandidateSpec) -> ProbeOutcome:
        url = candidate.url_for(hostname)
        status = await self._attempt(url, candidate.scheme)
        if self.logger:
            self.logger.debug(f"→ HEAD {url} = {status.value}")
        return ProbeOutcome(url=url, scheme=candidate.scheme,
                            port=candidate.port, status=status)

    async def _attempt(self, url: str, scheme: Scheme) -> ProbeStatus:
        try:
            await asyncio.wait_for(self.connector(url), timeout=self.timeout)
        except (asyncio.TimeoutError, TimeoutError, httpx.TimeoutException):
            # closed or filtered, no way to tell which
            return ProbeStatus.CLOSED
        except (httpx.TransportError, OSError) as exc:
            # OSError covers ssl.SSLError and refusals from non-httpx connectors
            if scheme is Scheme.HTTPS:
                # self-signed certificates are the norm on these hosts
                if self.logger:
                    self.logger.debug(f"TLS/transport error on {url}: {exc!r}")
                return ProbeStatus.SSL_ANOMALY
            return ProbeStatus.CLOSED
        # any HTTP status means the handshake went through
        return ProbeStatus.OPEN

