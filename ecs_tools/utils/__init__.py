"""Utility helpers for ECS Tools."""
