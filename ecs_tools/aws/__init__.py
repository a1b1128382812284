"""AWS access layer for ECS Tools."""
