"""
Infrastructure Layer Package

This package contains implementations of the ports defined in the
domain layer: the in-memory device management and asset module
backends, and the health check service that pings them.
"""

from src.infrastructure import backends, services

__all__ = ["backends", "services"]
