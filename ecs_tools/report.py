"""Text report rendering for clusters and services."""

import logging

from rich.console import Console
from rich.markup import escape
from rich.text import Text

from ecs_tools.aws.fetcher import ECSFetcher
from ecs_tools.models import Cluster, ContainerDefinition, Service

logger = logging.getLogger(__name__)

STATUS_WIDTH = 6
NAME_WIDTH = 50
SERVICE_STATUS_WIDTH = 8


def cluster_header(cluster: Cluster, total: int, listed: int | None = None) -> str:
    """Build the header line for a cluster.

    Args:
        cluster: Cluster being reported
        total: Number of services in the cluster
        listed: Number of services listed when the report is filtered,
            None for an unfiltered report

    Returns:
        Header text without markup
    """
    if listed is None:
        return f"--- CLUSTER: {cluster.name} ({total} services)"
    return f"--- CLUSTER: {cluster.name} (listing {listed}/{total} services)"


def select_services(services: list[Service], show_all: bool) -> list[Service] | None:
    """Pick the non-OK services to display.

    Returns:
        The non-OK services, or None when show_all is set or every
        service is OK, meaning the full list should be shown
    """
    if show_all:
        return None
    failing = [service for service in services if not service.is_ok()]
    return failing or None


class ReportRenderer:
    """Writes cluster and service reports to a rich console."""

    def __init__(self, console: Console, fetcher: ECSFetcher):
        self.console = console
        self.fetcher = fetcher

    def render_cluster(
        self,
        cluster: Cluster,
        services: list[Service],
        show_all: bool = False,
        long_output: bool = False,
    ) -> None:
        """Print a cluster header followed by its services."""
        failing = select_services(services, show_all)
        if failing is None:
            header = cluster_header(cluster, len(services))
            displayed = services
        else:
            header = cluster_header(cluster, len(services), len(failing))
            displayed = failing

        self.console.print(escape(header))
        for service in displayed:
            self.render_service(service, long_output)
        self.console.print()

    def render_service(self, service: Service, long_output: bool = False) -> None:
        """Print the summary line of a service, and container details if asked."""
        status = service.calculate_status()
        line = Text.assemble(
            (status.tag.ljust(STATUS_WIDTH), status.color),
            " ",
            (service.name.ljust(NAME_WIDTH), "yellow"),
            " ",
            service.status.ljust(SERVICE_STATUS_WIDTH),
            f" running {service.running_count}/{service.desired_count}",
            f"  ({service.task_definition_name})",
        )
        self.console.print(line)

        if long_output:
            logger.debug(f"Resolving containers of {service.name}")
            task_definition = self.fetcher.describe_task_definition(
                service.task_definition
            )
            for container in task_definition.container_definitions:
                self.render_container(container)
            self.console.print()

    def render_container(self, container: ContainerDefinition) -> None:
        lines = [
            f"- Container: {container.name}",
            f"  Image: {container.image}",
            f"  Memory: {container.memory_display} / CPU: {container.cpu}",
            f"  Ports: {container.ports_display}",
            "  Environment:",
        ]
        lines.extend(
            f"   - {key}: {value}" for key, value in container.environment.items()
        )
        for line in lines:
            self.console.print(line, markup=False, emoji=False)
