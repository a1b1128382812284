"""ECS Tools - command-line helpers for monitoring and scaling AWS ECS services."""

__version__ = "0.1.0"
