"""Service health status."""

from enum import Enum


class ServiceStatus(Enum):
    """Health of an ECS service as shown in reports."""

    OK = "OK"
    WARN = "WARN"
    KO = "KO"

    @property
    def tag(self) -> str:
        """Bracketed label printed in front of a service line."""
        return f"[{self.value}]"

    @property
    def color(self) -> str:
        """Rich style name for the tag."""
        return _STATUS_COLORS[self]


_STATUS_COLORS = {
    ServiceStatus.OK: "green",
    ServiceStatus.WARN: "yellow",
    ServiceStatus.KO: "red",
}
