import functools

from assetbag.asset import BaseAsset
from assetbag.base import (
    FrozenException,
    InvalidArgumentException,
    items,
)


def frozen_guard(f):
    @functools.wraps(f)
    def frozen_guard_wrapper(self, *args, **kwargs):
        if self._frozen:
            raise FrozenException(f'{f.__name__}() cannot be called on a frozen {type(self).__name__}.')
        return f(self, *args, **kwargs)

    return frozen_guard_wrapper


class AssetLibrary:
    # language=rst
    """
    A named, versioned bundle of assets that can declare dependencies on other libraries.

    .. code-block:: python

        library = AssetLibrary(dict(title='foo', version='1.2.3'))
        library.set_website('http://foo.bar').add_dependency('jquery', 'jquery.js')
        library.freeze()

    Once frozen, every mutator raises `FrozenException`. There is no way to unfreeze a library.
    """

    def __init__(self, values=None):
        self._frozen = False
        self._title = None
        self._version = None
        self._website = None
        self._dependencies = []
        self._assets = []

        setters = dict(
            title=self.set_title,
            version=self.set_version,
            website=self.set_website,
            dependencies=self._add_dependencies,
        )
        values = dict(values or {})
        unknown = sorted(k for k in values if k not in setters)
        if unknown:
            raise InvalidArgumentException(
                'AssetLibrary got unknown value(s): ' + ', '.join(f'"{k}"' for k in unknown)
            )
        for name, setter in items(setters):
            if name in values:
                setter(values[name])

    @frozen_guard
    def set_title(self, title):
        self._title = title
        return self

    def get_title(self):
        return self._title

    @frozen_guard
    def set_version(self, version):
        self._version = version
        return self

    def get_version(self):
        return self._version

    @frozen_guard
    def set_website(self, website):
        self._website = website
        return self

    def get_website(self):
        return self._website

    @frozen_guard
    def add_dependency(self, name, ref):
        """Declare a dependency on `ref` in the library `name`. Duplicates are kept."""
        self._dependencies.append((name, ref))
        return self

    @frozen_guard
    def clear_dependencies(self):
        self._dependencies = []
        return self

    def _add_dependencies(self, dependencies):
        for name, ref in dependencies:
            self.add_dependency(name, ref)

    def get_dependencies(self):
        return list(self._dependencies)

    @frozen_guard
    def add_asset(self, asset):
        if not isinstance(asset, BaseAsset):
            raise InvalidArgumentException(f'Only assets can be added to an AssetLibrary, got {asset!r}')
        self._assets.append(asset)
        return self

    def get_assets(self):
        return list(self._assets)

    def freeze(self):
        self._frozen = True
        return self

    def is_frozen(self):
        return self._frozen

    def __repr__(self):
        return f'<{type(self).__name__} {self._title} {self._version}{" frozen" if self._frozen else ""}>'
