from typing import List

from lanprobe.core.models import NavigationEvent


class EventLog:
    def __init__(self, eventsFilename: str) -> None:
        """
        # nav_context url [frame_id]
        7 http://100.64.1.10/
        7 http://100.64.1.10/ad-frame 3
        """

        self.events: List[NavigationEvent] = []
        self.eventsFilename = eventsFilename

    def parse(self) -> List[NavigationEvent]:

        with open(self.eventsFilename, 'r', encoding='utf-8', errors='ignore') as f:
            raw = f.read().replace("\r\n", "\n")

        self.events = []
        for lineno, line in enumerate(raw.split("\n"), start=1):
            line = line.strip()
            if not line or line.startswith("#"):
                continue

            parts = line.split()
            if len(parts) < 2 or len(parts) > 3:
                raise ValueError(f"line {lineno}: expected '<context> <url> [frame_id]', got {line!r}")

            frame_id = 0
            if len(parts) == 3:
                try:
                    frame_id = int(parts[2])
                except ValueError:
                    raise ValueError(f"line {lineno}: invalid frame id {parts[2]!r}") from None

            self.events.append(NavigationEvent(nav_context=parts[0], url=parts[1], frame_id=frame_id))

        return self.events

    def __str__(self) -> str:
        return f"File: {self.eventsFilename}\nEvents: {len(self.events)}"
