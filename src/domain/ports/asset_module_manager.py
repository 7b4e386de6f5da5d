"""Asset Module Manager Port - Domain Layer"""

from abc import ABC, abstractmethod
from typing import Dict, Optional

from src.domain.entities.device import Asset


class IAssetModuleManager(ABC):
    """Interface for resolving assets across the configured asset modules."""

    @abstractmethod
    async def get_asset(self, asset_module_id: str, asset_id: str) -> Optional[Asset]:
        """
        Look up an asset inside an asset module.

        Args:
            asset_module_id: Identifier of the asset module to search
            asset_id: Identifier of the asset within that module

        Returns:
            Optional[Asset]: The asset, or None if the module or asset is unknown
        """
        pass

    @abstractmethod
    async def ping(self) -> Dict[str, int]:
        """Ping the asset modules and return module and asset counters."""
        pass
