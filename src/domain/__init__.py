"""
Domain Layer Package

This package contains the core business rules of the service: device
group entities, the error taxonomy and the ports the backends implement.
It has no dependencies on frameworks or infrastructure.
"""

# Re-export submodules
from src.domain import entities, ports

__all__ = ["entities", "ports"]
