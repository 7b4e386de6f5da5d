"""In-memory asset modules, keyed by module id then asset id."""

import copy
from typing import Dict, Optional

from src.domain.entities.device import Asset
from src.domain.ports.asset_module_manager import IAssetModuleManager


class InMemoryAssetModuleManager(IAssetModuleManager):
    """Dictionary-backed implementation of the asset module manager."""

    def __init__(self) -> None:
        self._modules: Dict[str, Dict[str, Asset]] = {}

    def register_asset(self, asset: Asset) -> None:
        """Add or replace an asset, creating its module on first use."""
        module = self._modules.setdefault(asset.asset_module_id, {})
        module[asset.id] = copy.deepcopy(asset)

    async def get_asset(self, asset_module_id: str, asset_id: str) -> Optional[Asset]:
        asset = self._modules.get(asset_module_id, {}).get(asset_id)
        return copy.deepcopy(asset) if asset is not None else None

    async def ping(self) -> Dict[str, int]:
        return {
            "asset_modules": len(self._modules),
            "assets": sum(len(assets) for assets in self._modules.values()),
        }
