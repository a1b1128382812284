"""ECS data fetching."""

import logging
from typing import Any

from botocore.exceptions import BotoCoreError, ClientError

from ecs_tools.aws.client import AWSClients
from ecs_tools.errors import (
    RemoteCallError,
    ServiceAmbiguousError,
    ServiceNotFoundError,
)
from ecs_tools.models import (
    Cluster,
    ContainerDefinition,
    PortMapping,
    Service,
    ServiceEvent,
    TaskDefinition,
)
from ecs_tools.utils.batching import chunk

logger = logging.getLogger(__name__)

AWS_ERRORS = (ClientError, BotoCoreError)


class ECSFetcher:
    """Reads and updates ECS state through the boto3 client."""

    # DescribeClusters accepts at most 100 clusters per call
    MAX_CLUSTERS_PER_CALL = 100
    # DescribeServices accepts at most 10 services per call
    MAX_SERVICES_PER_CALL = 10

    def __init__(self, clients: AWSClients):
        """Initialize the fetcher.

        Args:
            clients: AWS clients container
        """
        self.clients = clients

    def list_clusters(self, name_filter: str = "") -> list[str]:
        """List cluster ARNs, optionally filtered.

        Args:
            name_filter: Case-insensitive substring the cluster ARN must
                contain. Empty means no filtering.

        Returns:
            Sorted list of cluster ARNs

        Raises:
            RemoteCallError: If the listing fails
        """
        logger.debug("Listing clusters")
        cluster_arns: list[str] = []
        try:
            paginator = self.clients.ecs.get_paginator("list_clusters")
            for page in paginator.paginate():
                cluster_arns.extend(page.get("clusterArns", []))
        except AWS_ERRORS as e:
            raise RemoteCallError(f"Failed to list clusters: {e}") from e

        if name_filter:
            needle = name_filter.lower()
            cluster_arns = [arn for arn in cluster_arns if needle in arn.lower()]

        logger.debug(f"Found {len(cluster_arns)} clusters")
        return sorted(cluster_arns)

    def describe_clusters(self, clusters: list[str]) -> list[Cluster]:
        """Describe clusters by name or ARN.

        Args:
            clusters: Cluster names or ARNs

        Returns:
            Clusters sorted by name

        Raises:
            RemoteCallError: If any describe call fails
        """
        result: list[Cluster] = []
        for batch in chunk(clusters, self.MAX_CLUSTERS_PER_CALL):
            try:
                response = self.clients.ecs.describe_clusters(clusters=batch)
            except AWS_ERRORS as e:
                raise RemoteCallError(f"Failed to describe clusters: {e}") from e

            self._log_failures(response)
            result.extend(self._build_cluster(c) for c in response.get("clusters", []))

        result.sort(key=lambda c: c.name)
        return result

    def list_services(self, cluster: str) -> list[Service]:
        """List and describe every service in a cluster.

        Service ARNs are collected from all pages, sorted, and described in
        batches of MAX_SERVICES_PER_CALL.

        Args:
            cluster: Cluster name or ARN

        Returns:
            Services ordered by ARN

        Raises:
            RemoteCallError: If listing or any describe batch fails
        """
        logger.debug(f"Listing services in cluster {cluster}")
        service_arns: list[str] = []
        try:
            paginator = self.clients.ecs.get_paginator("list_services")
            for page in paginator.paginate(cluster=cluster):
                service_arns.extend(page.get("serviceArns", []))
        except AWS_ERRORS as e:
            raise RemoteCallError(f"Failed to list services: {e}") from e

        service_arns.sort()

        services: list[Service] = []
        for batch in chunk(service_arns, self.MAX_SERVICES_PER_CALL):
            if batch:
                services.extend(self.describe_services(cluster, batch))
        return services

    def describe_services(self, cluster: str, services: list[str]) -> list[Service]:
        """Describe up to MAX_SERVICES_PER_CALL services in one call.

        Args:
            cluster: Cluster name or ARN
            services: Service names or ARNs

        Returns:
            Described services in the order ECS returned them

        Raises:
            RemoteCallError: If the describe call fails
        """
        logger.debug(f"Describing {len(services)} services in cluster {cluster}")
        try:
            response = self.clients.ecs.describe_services(
                cluster=cluster, services=services
            )
        except AWS_ERRORS as e:
            raise RemoteCallError(f"Failed to describe services: {e}") from e

        self._log_failures(response)
        return [self._build_service(s) for s in response.get("services", [])]

    def find_service(self, cluster: str, service: str) -> Service:
        """Resolve exactly one service by name.

        Args:
            cluster: Cluster name or ARN
            service: Service name or ARN

        Returns:
            The matching service

        Raises:
            ServiceNotFoundError: If no service matches
            ServiceAmbiguousError: If more than one service matches
            RemoteCallError: If the describe call fails
        """
        matches = self.describe_services(cluster, [service])
        if not matches:
            raise ServiceNotFoundError(
                f"No running service {service} in cluster {cluster}", cluster, service
            )
        if len(matches) > 1:
            raise ServiceAmbiguousError(
                f"Found more than 1 service named {service} in cluster {cluster}",
                cluster,
                service,
            )
        return matches[0]

    def describe_task_definition(self, task_definition: str) -> TaskDefinition:
        """Describe a task definition.

        Args:
            task_definition: Family:revision or full ARN

        Returns:
            The task definition with its containers

        Raises:
            RemoteCallError: If the describe call fails
        """
        logger.debug(f"Describing task definition {task_definition}")
        try:
            response = self.clients.ecs.describe_task_definition(
                taskDefinition=task_definition
            )
        except AWS_ERRORS as e:
            raise RemoteCallError(f"Failed to describe task definition: {e}") from e

        return self._build_task_definition(response.get("taskDefinition", {}))

    def update_desired_count(
        self, cluster: str, service: str, desired_count: int
    ) -> Service:
        """Set a service's desired count.

        Args:
            cluster: Cluster name or ARN
            service: Service name or ARN
            desired_count: New desired task count

        Returns:
            The service as returned by UpdateService

        Raises:
            RemoteCallError: If the update fails
        """
        logger.info(f"Updating {service} in {cluster} to desiredCount={desired_count}")
        try:
            response = self.clients.ecs.update_service(
                cluster=cluster, service=service, desiredCount=desired_count
            )
        except AWS_ERRORS as e:
            raise RemoteCallError(f"Failed to update service: {e}") from e

        return self._build_service(response.get("service", {}))

    def _log_failures(self, response: dict[str, Any]) -> None:
        """Log resources ECS could not describe."""
        for failure in response.get("failures", []):
            logger.warning(
                f"ECS failure for {failure.get('arn', '?')}: "
                f"{failure.get('reason', 'unknown')} {failure.get('detail', '')}".rstrip()
            )

    def _build_cluster(self, cluster_data: dict[str, Any]) -> Cluster:
        """Build Cluster object from API response."""
        return Cluster(
            name=cluster_data.get("clusterName", ""),
            arn=cluster_data.get("clusterArn", ""),
        )

    def _build_service(self, service_data: dict[str, Any]) -> Service:
        """Build Service object from API response."""
        events = [
            ServiceEvent(id=event.get("id", ""), message=event.get("message", ""))
            for event in service_data.get("events", [])
        ]

        return Service(
            name=service_data.get("serviceName", ""),
            arn=service_data.get("serviceArn", ""),
            status=service_data.get("status", ""),
            desired_count=service_data.get("desiredCount", 0),
            running_count=service_data.get("runningCount", 0),
            task_definition=service_data.get("taskDefinition", ""),
            events=events,
        )

    def _build_task_definition(self, task_def_data: dict[str, Any]) -> TaskDefinition:
        """Build TaskDefinition object from API response."""
        containers = []
        for container_data in task_def_data.get("containerDefinitions", []):
            port_mappings = [
                PortMapping(container_port=mapping.get("containerPort", 0))
                for mapping in container_data.get("portMappings", [])
            ]

            # Later entries win if a name repeats
            environment = {
                env["name"]: env.get("value", "")
                for env in container_data.get("environment", [])
                if "name" in env
            }

            containers.append(
                ContainerDefinition(
                    name=container_data.get("name", ""),
                    image=container_data.get("image", ""),
                    memory=container_data.get("memory"),
                    cpu=container_data.get("cpu", 0),
                    port_mappings=port_mappings,
                    environment=environment,
                )
            )

        return TaskDefinition(
            arn=task_def_data.get("taskDefinitionArn", ""),
            container_definitions=containers,
        )
