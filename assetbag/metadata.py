from copy import deepcopy

from assetbag.base import (
    AssetType,
    items,
    to_asset_type,
)
from assetbag.struct import (
    merged,
    Struct,
)


class MetadataBag:
    # language=rst
    """
    A typed bag of per-asset properties such as `media`, `scope` or `preprocess`.

    The asset type (`css` or `js`) is fixed when the bag is created. Each typed subclass
    declares its hard coded defaults in `defaults`. Values set explicitly live on top of
    those defaults and can be reverted individually:

    .. code-block:: python

        bag = CssMetadataBag(dict(media='print'))
        bag.get('media')  # 'print'
        bag.revert('media')
        bag.get('media')  # 'all'

    The bag is open ended: keys that have no default are accepted as well. A plain
    `MetadataBag('css')` gets the same defaults as `CssMetadataBag()`.
    """

    defaults = Struct()

    def __init__(self, asset_type, values=None):
        self._asset_type = to_asset_type(asset_type)
        defaults = self.defaults
        if type(self) is MetadataBag:
            defaults = defaults_by_asset_type[self._asset_type]
        self._defaults = deepcopy(defaults)
        self._explicit = Struct()
        if values:
            self.replace(values)

    @staticmethod
    def for_type(asset_type, values=None):
        asset_type = to_asset_type(asset_type)
        if asset_type is AssetType.css:
            return CssMetadataBag(values=values)
        return JsMetadataBag(values=values)

    def get_type(self):
        return self._asset_type

    def get(self, key, default=None):
        if key in self._explicit:
            return self._explicit[key]
        return self._defaults.get(key, default)

    def set(self, key, value):
        self._explicit[key] = value
        return self

    def has(self, key):
        return key in self._explicit or key in self._defaults

    def keys(self):
        return list(self.all().keys())

    def all(self):
        return merged(self._defaults, self._explicit)

    def add(self, values):
        """Set each of `values` that has not already been set explicitly."""
        for key, value in items(dict(values)):
            if key not in self._explicit:
                self._explicit[key] = value
        return self

    def replace(self, values):
        for key, value in items(dict(values)):
            self._explicit[key] = value
        return self

    def is_default(self, key):
        return key not in self._explicit and key in self._defaults

    def revert(self, key):
        self._explicit.pop(key, None)
        return self

    def clone(self):
        return deepcopy(self)

    def __contains__(self, key):
        return self.has(key)

    def __getitem__(self, key):
        if not self.has(key):
            raise KeyError(key)
        return self.get(key)

    def __eq__(self, other):
        if not isinstance(other, MetadataBag):
            return NotImplemented
        return self._asset_type == other._asset_type and self.all() == other.all()

    __hash__ = None

    def __repr__(self):
        return f'<{type(self).__name__} {self._asset_type} {self.all()!r}>'


class CssMetadataBag(MetadataBag):
    defaults = Struct(
        every_page=False,
        media='all',
        preprocess=True,
        weight=0,
        browsers={'IE': True, '!IE': True},
    )

    def __init__(self, values=None):
        super().__init__(AssetType.css, values)


class JsMetadataBag(MetadataBag):
    defaults = Struct(
        every_page=False,
        scope='footer',
        cache=True,
        preprocess=True,
        weight=0,
        attributes={},
        version=None,
        browsers={},
    )

    def __init__(self, values=None):
        super().__init__(AssetType.js, values)


defaults_by_asset_type = {
    AssetType.css: CssMetadataBag.defaults,
    AssetType.js: JsMetadataBag.defaults,
}
