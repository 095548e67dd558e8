import argparse
import asyncio
from urllib.parse import urlsplit

from lanprobe.core.config import EngineConfig, LOCK_COOLDOWN, SCAN_TIMEOUT
from lanprobe.core.engine import Engine
from lanprobe.core.models import NavigationEvent
from lanprobe.hosts.console import ConsoleHost
from lanprobe.parsers.events import EventLog
from lanprobe.reporters.console import Log


def build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(description="LAN endpoint discovery and redirect")
    p.add_argument("--url", action="append", default=[],
                   help="Navigation URL (ej: http://100.64.1.10/), repeatable")
    p.add_argument("--events", help="Archivo de eventos: '<context> <url> [frame_id]' por línea")
    p.add_argument("--context", default="1", help="Navigation context for --url")
    p.add_argument("--range", action="append", dest="ranges", default=[],
                   help="Target range A.B.C.D-E.F.G.H or CIDR, repeatable")
    p.add_argument("--timeout", type=float, default=SCAN_TIMEOUT,
                   help="Probe deadline in seconds")
    p.add_argument("--cooldown", type=float, default=LOCK_COOLDOWN,
                   help="Redirect lock cooldown in seconds")
    p.add_argument("--proxy", help="Proxy (ej: http://127.0.0.1:8080)")
    p.add_argument("--insecure", action="store_true",
                   help="Skip TLS verification (self-signed hosts report OPEN)")
    p.add_argument("--scan-only", action="store_true",
                   help="Print ranked endpoints without redirect gating")
    p.add_argument("-v", "--verbose", action="count", default=1,
                   help="-v, -vv")
    return p


async def run(engine: Engine, events, log: Log, scan_only: bool = False):
    async with engine:
        for ev in events:
            if scan_only:
                host = urlsplit(ev.url).hostname or ev.url
                ranked = await engine.scan_host(host)
                if not ranked:
                    log.fail(f"No active interfaces found on {host}")
                for s in ranked:
                    log.outcome(s.url, s.status.value, s.score)
                continue
            decision = await engine.dispatch(ev)
            if decision is None:
                log.debug(f"[{ev.nav_context}] {ev.url} ignored")
            elif not decision.redirects:
                log.info(f"[{ev.nav_context}] {ev.url} left as is ({decision.reason})")


def main():
    p = build_parser()
    args = p.parse_args()
    if not args.url and not args.events:
        p.error("one of --url or --events is required")

    try:
        config = EngineConfig(probe_timeout=args.timeout, cooldown=args.cooldown,
                              verify_tls=not args.insecure, proxy=args.proxy)
        if args.ranges:
            config = config.with_ranges(args.ranges)
        events = [NavigationEvent(args.context, u) for u in args.url]
        if args.events:
            events.extend(EventLog(args.events).parse())
    except (ValueError, OSError) as exc:
        p.error(str(exc))

    log = Log(verbose=args.verbose)
    host = ConsoleHost(logger=log)
    engine = Engine(config=config, host=host, logger=log)
    asyncio.run(run(engine, events, log, scan_only=args.scan_only))


if __name__ == "__main__":
    main()
