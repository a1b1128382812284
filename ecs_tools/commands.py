"""Implementations of the monitor, scale and image commands."""

import logging

from rich.console import Console
from rich.markup import escape

from ecs_tools.aws.fetcher import ECSFetcher
from ecs_tools.report import ReportRenderer

logger = logging.getLogger(__name__)


def run_monitor(
    fetcher: ECSFetcher,
    console: Console,
    cluster: str | None = None,
    name_filter: str = "",
    long_output: bool = False,
    show_all: bool = False,
) -> None:
    """Report service health for one cluster or all matching clusters.

    Args:
        fetcher: ECS fetcher
        console: Console to print to
        cluster: Single cluster to report on. When unset, every cluster
            whose name matches name_filter is reported.
        name_filter: Case-insensitive cluster name filter
        long_output: Also print container details for each service
        show_all: List OK services too
    """
    if cluster:
        cluster_names = [cluster]
    else:
        cluster_names = fetcher.list_clusters(name_filter)
        if not cluster_names:
            logger.warning("No clusters matched")
            return

    renderer = ReportRenderer(console, fetcher)
    for ecs_cluster in fetcher.describe_clusters(cluster_names):
        services = fetcher.list_services(ecs_cluster.name)
        renderer.render_cluster(
            ecs_cluster, services, show_all=show_all, long_output=long_output
        )


def run_scale(
    fetcher: ECSFetcher,
    console: Console,
    cluster: str,
    service: str,
    desired_count: int,
) -> None:
    """Set the desired count of a service unless it already has it.

    Raises:
        ServiceLookupError: If the service does not resolve to exactly one
        RemoteCallError: If describing or updating the service fails
    """
    ecs_service = fetcher.find_service(cluster, service)
    name = escape(service)

    if ecs_service.desired_count == desired_count:
        console.print(
            f"Service [yellow]{name}[/yellow] already has a "
            f"DesiredCount of {desired_count}"
        )
        return

    console.print(
        f"[yellow]Updating {name} / "
        f"DesiredCount\\[{ecs_service.desired_count} -> {desired_count}] "
        f"RunningCount={ecs_service.running_count}[/yellow]"
    )
    fetcher.update_desired_count(cluster, service, desired_count)
    console.print(
        f"Service {name} successfully updated with DesiredCount={desired_count}"
    )


def run_image(fetcher: ECSFetcher, console: Console, cluster: str, service: str) -> None:
    """Print the image of every container in a service's task definition."""
    ecs_service = fetcher.find_service(cluster, service)
    task_definition = fetcher.describe_task_definition(ecs_service.task_definition)
    for container in task_definition.container_definitions:
        console.print(container.image, markup=False, emoji=False)
