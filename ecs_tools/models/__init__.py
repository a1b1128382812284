"""Data models for ECS Tools."""

from ecs_tools.models.health import ServiceStatus
from ecs_tools.models.cluster import Cluster
from ecs_tools.models.service import Service, ServiceEvent
from ecs_tools.models.task_definition import (
    ContainerDefinition,
    PortMapping,
    TaskDefinition,
)

__all__ = [
    "ServiceStatus",
    "Cluster",
    "Service",
    "ServiceEvent",
    "TaskDefinition",
    "ContainerDefinition",
    "PortMapping",
]
