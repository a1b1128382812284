"""Shared fixtures for ECS Tools tests."""

import io
from unittest.mock import MagicMock

import pytest
from rich.console import Console

from ecs_tools.aws.fetcher import ECSFetcher
from ecs_tools.models import Service, ServiceEvent

STEADY = "(service web) has reached a steady state."


@pytest.fixture
def mock_clients():
    """Create mock AWS clients."""
    clients = MagicMock()
    clients.region = "us-east-1"
    clients.ecs = MagicMock()
    return clients


@pytest.fixture
def fetcher(mock_clients):
    """Create an ECSFetcher with mock clients."""
    return ECSFetcher(mock_clients)


@pytest.fixture
def output():
    """In-memory buffer behind the test console."""
    return io.StringIO()


@pytest.fixture
def console(output):
    """A plain-text rich console writing to the output buffer."""
    return Console(file=output, width=200, highlight=False, emoji=False, color_system=None)


@pytest.fixture
def make_service():
    """Factory for Service objects."""

    def _make(
        name="web",
        running=2,
        desired=2,
        event=STEADY,
        status="ACTIVE",
        task_definition="arn:aws:ecs:us-east-1:123:task-definition/web:5",
    ):
        events = [ServiceEvent(id="e1", message=event)] if event is not None else []
        return Service(
            name=name,
            arn=f"arn:aws:ecs:us-east-1:123:service/demo/{name}",
            status=status,
            desired_count=desired,
            running_count=running,
            task_definition=task_definition,
            events=events,
        )

    return _make
