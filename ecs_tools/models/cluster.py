"""Cluster model."""

from dataclasses import dataclass


@dataclass
class Cluster:
    """An ECS cluster as returned by DescribeClusters."""

    name: str
    arn: str
