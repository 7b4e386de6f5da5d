"""
Application Layer Package

This package contains the application-specific rules: use cases that
delegate to the device management backend, DTOs for the wire format and
the mappers that copy domain objects into them.
"""

# Re-export submodules
from src.application import dtos, mappers, use_cases

__all__ = ["dtos", "mappers", "use_cases"]
