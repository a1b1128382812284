"""AWS client initialization and configuration."""

import logging

import boto3
from botocore.config import Config as BotoConfig
from botocore.exceptions import BotoCoreError

from ecs_tools.config import AWSConfig, ConfigError

logger = logging.getLogger(__name__)


def create_ecs_client(aws_config: AWSConfig):
    """Create a configured ECS client.

    Args:
        aws_config: AWS settings with optional region and profile

    Returns:
        Configured boto3 ECS client

    Raises:
        ConfigError: If the profile is unknown or no region can be resolved
    """
    boto_config = BotoConfig(
        retries={
            "max_attempts": aws_config.max_attempts,
            "mode": "standard",
        },
    )

    session_kwargs = {}
    if aws_config.profile:
        session_kwargs["profile_name"] = aws_config.profile

    try:
        session = boto3.Session(**session_kwargs)
        return session.client(
            "ecs",
            region_name=aws_config.region,
            config=boto_config,
        )
    except BotoCoreError as e:
        raise ConfigError(f"Failed to load AWS SDK configuration, {e}") from e


class AWSClients:
    """Container for AWS clients."""

    def __init__(self, aws_config: AWSConfig):
        """Initialize AWS clients.

        Args:
            aws_config: AWS settings
        """
        self.ecs = create_ecs_client(aws_config)
        self.region = self.ecs.meta.region_name
        logger.debug(f"ECS client ready in region {self.region}")
