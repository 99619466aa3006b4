from assetbag.asset import BaseAsset
from assetbag.base import (
    AssetType,
    InvalidArgumentException,
    values,
)
from assetbag.sort_after import sort_after


def _to_id(asset_or_id):
    if isinstance(asset_or_id, BaseAsset):
        return asset_or_id.id()
    return asset_or_id


class AssetCollection:
    # language=rst
    """
    An ordered container of assets, keyed by asset id. Iteration is in insertion order.

    Adding an asset whose id is already present is a no-op: the first asset wins.
    Use `sort()` to get the assets in an order that honors the `after()` relations
    between them.
    """

    def __init__(self, assets=None):
        self._assets = {}
        for asset in assets or []:
            self.add(asset)

    def add(self, asset):
        if not isinstance(asset, BaseAsset):
            raise InvalidArgumentException(f'Only assets can be added to an AssetCollection, got {asset!r}')
        asset_id = asset.id()
        if asset_id in self._assets:
            return False
        self._assets[asset_id] = asset
        return True

    def remove(self, asset_or_id):
        return self._assets.pop(_to_id(asset_or_id), None) is not None

    def get(self, asset_id):
        return self._assets[asset_id]

    def get_css(self):
        return [x for x in self if x.get_asset_type() is AssetType.css]

    def get_js(self):
        return [x for x in self if x.get_asset_type() is AssetType.js]

    def sort(self):
        return list(values(sort_after(dict(self._assets))))

    def __contains__(self, asset_or_id):
        return _to_id(asset_or_id) in self._assets

    def __iter__(self):
        return iter(list(values(self._assets)))

    def __len__(self):
        return len(self._assets)

    def __repr__(self):
        return f'<{type(self).__name__} {len(self)} assets>'
