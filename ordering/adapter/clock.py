from datetime import datetime, timezone

from ordering import port


class SystemClock(port.clock.Clock):
    def now(self) -> datetime:
        return datetime.now(timezone.utc)
