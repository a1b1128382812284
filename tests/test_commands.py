"""Tests for the monitor, scale and image commands."""

from unittest.mock import MagicMock

import pytest

from ecs_tools.aws.fetcher import ECSFetcher
from ecs_tools.commands import run_image, run_monitor, run_scale
from ecs_tools.errors import RemoteCallError, ServiceNotFoundError
from ecs_tools.models import Cluster, ContainerDefinition, TaskDefinition

UNPLACEABLE = "(service S2) was unable to place a task."


@pytest.fixture
def mock_fetcher():
    return MagicMock(spec=ECSFetcher)


def make_cluster(name: str) -> Cluster:
    return Cluster(name=name, arn=f"arn:aws:ecs:us-east-1:123:cluster/{name}")


class TestRunMonitor:
    """Tests for run_monitor."""

    def test_demo_cluster_lists_failing_service(
        self, mock_fetcher, console, output, make_service
    ):
        """Test that only the KO service of the demo cluster is listed."""
        mock_fetcher.list_clusters.return_value = ["arn:aws:ecs:us-east-1:123:cluster/demo"]
        mock_fetcher.describe_clusters.return_value = [make_cluster("demo")]
        mock_fetcher.list_services.return_value = [
            make_service("S1", running=2, desired=2),
            make_service("S2", running=0, desired=2, event=UNPLACEABLE),
        ]

        run_monitor(mock_fetcher, console)

        lines = output.getvalue().splitlines()
        assert lines[0] == "--- CLUSTER: demo (listing 1/2 services)"
        assert lines[1].startswith("[KO]")
        assert "S2" in lines[1]
        assert "S1" not in output.getvalue()
        mock_fetcher.list_clusters.assert_called_once_with("")
        mock_fetcher.list_services.assert_called_once_with("demo")
        mock_fetcher.describe_task_definition.assert_not_called()

    def test_explicit_cluster_skips_listing(self, mock_fetcher, console, make_service):
        mock_fetcher.describe_clusters.return_value = [make_cluster("demo")]
        mock_fetcher.list_services.return_value = [make_service("S1")]

        run_monitor(mock_fetcher, console, cluster="demo")

        mock_fetcher.list_clusters.assert_not_called()
        mock_fetcher.describe_clusters.assert_called_once_with(["demo"])

    def test_filter_passed_to_listing(self, mock_fetcher, console):
        mock_fetcher.list_clusters.return_value = []

        run_monitor(mock_fetcher, console, name_filter="prod")

        mock_fetcher.list_clusters.assert_called_once_with("prod")
        mock_fetcher.describe_clusters.assert_not_called()

    def test_clusters_reported_in_order(self, mock_fetcher, console, output, make_service):
        mock_fetcher.list_clusters.return_value = ["a", "b"]
        mock_fetcher.describe_clusters.return_value = [make_cluster("alpha"), make_cluster("beta")]
        mock_fetcher.list_services.return_value = [make_service("S1")]

        run_monitor(mock_fetcher, console, show_all=True)

        headers = [line for line in output.getvalue().splitlines() if line.startswith("---")]
        assert headers == [
            "--- CLUSTER: alpha (1 services)",
            "--- CLUSTER: beta (1 services)",
        ]

    def test_remote_error_propagates(self, mock_fetcher, console):
        mock_fetcher.list_clusters.side_effect = RemoteCallError("Failed to list clusters: x")

        with pytest.raises(RemoteCallError):
            run_monitor(mock_fetcher, console)


class TestRunScale:
    """Tests for run_scale."""

    def test_same_count_is_noop(self, mock_fetcher, console, output, make_service):
        """Test that no update is sent when the count already matches."""
        mock_fetcher.find_service.return_value = make_service("web", running=2, desired=2)

        run_scale(mock_fetcher, console, "demo", "web", 2)

        mock_fetcher.find_service.assert_called_once_with("demo", "web")
        mock_fetcher.update_desired_count.assert_not_called()
        assert "Service web already has a DesiredCount of 2" in output.getvalue()

    def test_updates_desired_count(self, mock_fetcher, console, output, make_service):
        mock_fetcher.find_service.return_value = make_service("web", running=1, desired=2)

        run_scale(mock_fetcher, console, "demo", "web", 5)

        mock_fetcher.update_desired_count.assert_called_once_with("demo", "web", 5)
        lines = output.getvalue().splitlines()
        assert lines == [
            "Updating web / DesiredCount[2 -> 5] RunningCount=1",
            "Service web successfully updated with DesiredCount=5",
        ]

    def test_scale_to_zero(self, mock_fetcher, console, make_service):
        mock_fetcher.find_service.return_value = make_service("web", running=2, desired=2)

        run_scale(mock_fetcher, console, "demo", "web", 0)

        mock_fetcher.update_desired_count.assert_called_once_with("demo", "web", 0)

    def test_update_failure(self, mock_fetcher, console, output, make_service):
        """Test that a failed update raises and prints no confirmation."""
        mock_fetcher.find_service.return_value = make_service("web", running=1, desired=2)
        mock_fetcher.update_desired_count.side_effect = RemoteCallError(
            "Failed to update service: denied"
        )

        with pytest.raises(RemoteCallError):
            run_scale(mock_fetcher, console, "demo", "web", 5)
        assert "successfully" not in output.getvalue()

    def test_missing_service(self, mock_fetcher, console):
        mock_fetcher.find_service.side_effect = ServiceNotFoundError(
            "No running service web in cluster demo", "demo", "web"
        )

        with pytest.raises(ServiceNotFoundError):
            run_scale(mock_fetcher, console, "demo", "web", 5)
        mock_fetcher.update_desired_count.assert_not_called()


class TestRunImage:
    """Tests for run_image."""

    def test_prints_one_image_per_container(self, mock_fetcher, console, output, make_service):
        service = make_service("web")
        mock_fetcher.find_service.return_value = service
        mock_fetcher.describe_task_definition.return_value = TaskDefinition(
            arn=service.task_definition,
            container_definitions=[
                ContainerDefinition(name="app", image="123.dkr.ecr.us-east-1.amazonaws.com/app:1.4.2"),
                ContainerDefinition(name="proxy", image="envoyproxy/envoy:v1.27.0"),
            ],
        )

        run_image(mock_fetcher, console, "demo", "web")

        mock_fetcher.describe_task_definition.assert_called_once_with(service.task_definition)
        assert output.getvalue().splitlines() == [
            "123.dkr.ecr.us-east-1.amazonaws.com/app:1.4.2",
            "envoyproxy/envoy:v1.27.0",
        ]

    def test_missing_service(self, mock_fetcher, console):
        mock_fetcher.find_service.side_effect = ServiceNotFoundError(
            "No running service web in cluster demo", "demo", "web"
        )

        with pytest.raises(ServiceNotFoundError):
            run_image(mock_fetcher, console, "demo", "web")
        mock_fetcher.describe_task_definition.assert_not_called()
