"""
Dependency container injection module - Main Layer

This module implements the dependency injection container
to simplify the management and lifecycle of dependencies
in the application.
"""

from contextlib import asynccontextmanager

from dependency_injector import containers, providers

from src.application.use_cases.device_group_use_cases import (
    CreateDeviceGroupUseCase,
    DeleteDeviceGroupUseCase,
    GetDeviceGroupByTokenUseCase,
    ListDeviceGroupElementsUseCase,
    ListDeviceGroupsUseCase,
    UpdateDeviceGroupUseCase,
)
from src.application.use_cases.health_use_cases import CheckBackendHealthUseCase
from src.infrastructure.backends import (
    InMemoryAssetModuleManager,
    InMemoryDeviceManagement,
    load_seed_file,
)
from src.infrastructure.services.health_check_service import HealthCheckService
from src.shared import get_logger

from .config import AppSettings

logger = get_logger(__name__)


class AppContainer(containers.DeclarativeContainer):
    """Composition Root using dependecy-injector."""

    wiring_config = containers.WiringConfiguration(packages=["..presentation"])

    # Settings
    config = providers.Configuration()

    # Infrastructure
    device_management = providers.Singleton(
        InMemoryDeviceManagement,
        default_user=config.backend.default_user,
    )

    asset_module_manager = providers.Singleton(InMemoryAssetModuleManager)

    health_check_service = providers.Singleton(
        HealthCheckService,
        device_management=device_management,
        asset_module_manager=asset_module_manager,
        timeout=config.backend.health_timeout,
    )

    # Application (use cases)
    create_device_group_use_case = providers.Factory(
        CreateDeviceGroupUseCase,
        device_management=device_management,
    )

    get_device_group_by_token_use_case = providers.Factory(
        GetDeviceGroupByTokenUseCase,
        device_management=device_management,
    )

    update_device_group_use_case = providers.Factory(
        UpdateDeviceGroupUseCase,
        device_management=device_management,
    )

    delete_device_group_use_case = providers.Factory(
        DeleteDeviceGroupUseCase,
        device_management=device_management,
    )

    list_device_groups_use_case = providers.Factory(
        ListDeviceGroupsUseCase,
        device_management=device_management,
    )

    list_device_group_elements_use_case = providers.Factory(
        ListDeviceGroupElementsUseCase,
        device_management=device_management,
        asset_module_manager=asset_module_manager,
    )

    check_backend_health_use_case = providers.Factory(
        CheckBackendHealthUseCase,
        health_check=health_check_service,
        version=config.service.version,
    )


# -------------------------
# Global Container Instance
# -------------------------
_app_container: AppContainer | None = None


def init_container(settings: AppSettings) -> AppContainer:
    """Initialize global container with application settings."""

    global _app_container

    container = AppContainer()
    container.config.from_pydantic(settings)
    _app_container = container
    return container


def get_container() -> AppContainer:
    """Get the initialized global container."""

    if _app_container is None:
        raise RuntimeError("Container has not been initialized yet")

    return _app_container


@asynccontextmanager
async def app_lifespan():
    """
    Centralized lifecycle management for the backends.

    Loads the configured seed document into the in-memory backends on
    startup. The backends hold no external resources, so shutdown only
    logs.
    """
    container = get_container()

    device_management = container.device_management()
    asset_module_manager = container.asset_module_manager()

    seed_file = container.config.backend.seed_file()
    if seed_file:
        logger.info("container.seed.loading", path=seed_file)
        await load_seed_file(seed_file, device_management, asset_module_manager)

    logger.info("container.resources.initialized")
    try:
        yield container
    finally:
        logger.info("container.resources.shutdown")
