"""
Presentation Layer Package

This package contains the HTTP surface of the service: routers, the
request context middleware and the error translation module.
"""

from src.presentation import controllers, errors, middleware

__all__ = ["controllers", "errors", "middleware"]
