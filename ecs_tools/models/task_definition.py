"""Task definition models."""

from dataclasses import dataclass, field


@dataclass
class PortMapping:
    """A container port mapping."""

    container_port: int


@dataclass
class ContainerDefinition:
    """A container within a task definition."""

    name: str
    image: str
    memory: int | None = None
    cpu: int = 0
    port_mappings: list[PortMapping] = field(default_factory=list)
    environment: dict[str, str] = field(default_factory=dict)

    @property
    def ports_display(self) -> str:
        """Space-separated '->port' tokens."""
        return " ".join(f"->{port.container_port}" for port in self.port_mappings)

    @property
    def memory_display(self) -> str:
        """Hard memory limit in MiB, or '-' when unset."""
        return str(self.memory) if self.memory is not None else "-"


@dataclass
class TaskDefinition:
    """An ECS task definition."""

    arn: str
    container_definitions: list[ContainerDefinition] = field(default_factory=list)
