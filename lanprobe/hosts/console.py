"""Host that records redirects and reports them on the console."""

from typing import List, Tuple

from lanprobe.hosts.base import NavigationHost


class ConsoleHost(NavigationHost):

    def __init__(self, logger=None):
        self.logger = logger
        self.targets: List[Tuple[str, str]] = []

    def set_navigation_target(self, nav_context: str, url: str) -> None:
        self.targets.append((nav_context, url))
        if self.logger:
            self.logger.ok(f"[{nav_context}] navigate → {self.logger.URL}{url}")
