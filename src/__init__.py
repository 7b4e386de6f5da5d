"""
Source Code Root Module

This module serves as the root for the source code of the device groups
service.

Layer Structure:
- Domain: Device group entities, errors and backend ports
- Application: Use cases, DTOs and mappers
- Infrastructure: In-memory backends and health checks
- Presentation: Controllers, middleware and error translation for the REST API
- Shared: Cross-cutting concerns and shared utilities
- Main: Composition root, application entry point and configuration
"""
