"""Abstract boundary to the environment that hosts navigations."""

from abc import ABC, abstractmethod


class NavigationHost(ABC):
    """Receives redirect commands. Issuing one is the engine's only side effect."""

    @abstractmethod
    def set_navigation_target(self, nav_context: str, url: str) -> None:
        """Send the navigation identified by *nav_context* to *url*."""
        ...
