"""
Controllers Package - Presentation Layer

This package contains FastAPI controllers (routers) that handle
HTTP requests and responses. Controllers extract and default request
parameters, call application use cases and translate domain errors
into HTTP errors.
"""

from .device_groups_controller import router as device_groups_router
from .health_controller import router as health_router

__all__ = ["device_groups_router", "health_router"]
