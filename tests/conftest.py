import asyncio

import httpx
import pytest

from lanprobe.core.models import ProbeOutcome, ProbeStatus, Scheme

TARGET = "100.64.1.10"


class FakeClock:
    def __init__(self, now: float = 1000.0):
        self.now = now

    def __call__(self) -> float:
        return self.now

    def advance(self, seconds: float):
        self.now += seconds


class RecordingLog:
    """Stands in for the console Log and keeps every message."""

    def __init__(self):
        self.lines = []
        self.URL = ""

    def _add(self, level, msg):
        self.lines.append((level, msg))

    def info(self, msg): self._add("info", msg)
    def warn(self, msg): self._add("warn", msg)
    def ok(self, msg): self._add("ok", msg)
    def fail(self, msg): self._add("fail", msg)
    def debug(self, msg): self._add("debug", msg)

    def outcome(self, url, status, score):
        self._add("outcome", f"{url} {status} {score}")

    def decision(self, ctx, host, action, reason):
        self._add("decision", f"{ctx}-{host} {action} {reason}")

    def messages(self, level):
        return [m for lvl, m in self.lines if lvl == level]


class ScriptedConnector:
    """
    Network primitive driven by a url -> behaviour table:
      "open"          -> returns a 200 response
      "hang"          -> never answers before the deadline
      BaseException   -> raised as is
    Unlisted urls use *default*.
    """

    def __init__(self, script=None, default="hang"):
        self.script = dict(script or {})
        self.default = default
        self.calls = []

    async def __call__(self, url):
        self.calls.append(url)
        behaviour = self.script.get(url, self.default)
        if behaviour == "hang":
            await asyncio.sleep(30)
        if isinstance(behaviour, BaseException):
            raise behaviour
        return httpx.Response(200)


def outcome(port, scheme, status, host=TARGET):
    scheme = Scheme(scheme)
    return ProbeOutcome(url=f"{scheme.value}://{host}:{port}", scheme=scheme,
                        port=port, status=ProbeStatus(status))


@pytest.fixture
def clock():
    return FakeClock()


@pytest.fixture
def log():
    return RecordingLog()
