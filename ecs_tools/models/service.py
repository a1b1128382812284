"""Service model and health classification."""

from dataclasses import dataclass, field

from ecs_tools.models.health import ServiceStatus
from ecs_tools.utils.ids import extract_task_definition_name

STEADY_STATE_MARKER = "has reached a steady state"


@dataclass
class ServiceEvent:
    """A service event message. ECS returns these newest first."""

    id: str
    message: str


@dataclass
class Service:
    """An ECS service."""

    name: str
    arn: str
    status: str
    desired_count: int
    running_count: int
    task_definition: str
    events: list[ServiceEvent] = field(default_factory=list)

    @property
    def task_definition_name(self) -> str:
        """Short task definition name, e.g. 'web:5'."""
        return extract_task_definition_name(self.task_definition)

    @property
    def latest_event(self) -> ServiceEvent | None:
        """Most recent event, or None if the service has none."""
        return self.events[0] if self.events else None

    def is_up(self) -> bool:
        """Check whether the service runs its desired count in a steady state.

        Returns:
            True if running equals desired and the newest event reports a
            steady state
        """
        latest = self.latest_event
        return (
            self.running_count == self.desired_count
            and latest is not None
            and STEADY_STATE_MARKER in latest.message
        )

    def calculate_status(self) -> ServiceStatus:
        """Derive the service status.

        A service that is not up is KO. A service that is up but scaled to
        zero tasks is WARN. Anything else is OK.
        """
        if not self.is_up():
            return ServiceStatus.KO
        if self.running_count == 0:
            return ServiceStatus.WARN
        return ServiceStatus.OK

    def is_ok(self) -> bool:
        """True if the service status is OK."""
        return self.calculate_status() is ServiceStatus.OK
