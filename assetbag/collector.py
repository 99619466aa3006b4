import logging

from assetbag.asset import (
    ExternalAsset,
    FileAsset,
    StringAsset,
)
from assetbag.base import (
    AlreadyLockedException,
    AssetType,
    InvalidTypeException,
    LockedException,
    MISSING,
    NoCollectionAttachedException,
    NotLockedException,
    SourceType,
    to_asset_type,
    to_source_type,
    WrongKeyException,
)
from assetbag.metadata import (
    CssMetadataBag,
    JsMetadataBag,
    MetadataBag,
)

log = logging.getLogger('assetbag')


asset_class_by_source_type = {
    SourceType.file: FileAsset,
    SourceType.string: StringAsset,
    SourceType.external: ExternalAsset,
}


def _same_key(a, b):
    return a is b or (type(a) is type(b) and a == b)


class AssetCollector:
    # language=rst
    """
    Creates assets and collects them into an :doc:`AssetCollection`.

    Set the collector up with the defaults you want, attach a collection, and then hand
    it to the code that produces assets:

    .. code-block:: python

        collection = AssetCollection()
        collector = AssetCollector(collection)
        collector.create('css', 'file', 'css/base.css')
        collector.create('css', 'string', 'body { color: red; }', options=dict(media='print'))
        collector.create('js', 'external', 'https://cdn.example.com/lib.js')

    CSS assets created one after the other are ordered after each other automatically,
    since the cascade makes their order significant. Call `clear_last_css()` to end such
    a series.

    The collector can be locked with a key. While locked, the attached collection and the
    metadata defaults cannot be changed, but assets can still be created. The lock is not
    a thread synchronization primitive: it only guards the configuration against code
    that does not hold the key.
    """

    def __init__(self, collection=None):
        self._collection = None
        self._locked = False
        self._lock_key = MISSING
        self._last_css_id = None
        self.restore_defaults()

        if collection is not None:
            self.set_collection(collection)

    def add(self, asset):
        """
        Add an asset to the attached collection. Assets made with `create()` are added
        automatically.
        """
        if self._collection is None:
            raise NoCollectionAttachedException('No collection is currently attached to this collector.')
        self._collection.add(asset)
        return self

    def create(self, asset_type, source_type, data, options=None, filters=None, keep_last=True):
        # language=rst
        """
        Create an asset, add it to the attached collection (if any) and return it.

        :param asset_type: `'css'` or `'js'`. `'style'` and `'script'` are accepted as aliases.
        :param source_type: `'file'`, `'string'` or `'external'`. `'inline'` is an alias for `'string'`.
        :param data: the file path, the css/js text, or the absolute external url.
        :param options: metadata that overrides the defaults for this asset.
        :param filters: filters to apply when the asset is loaded.
        :param keep_last: remember this asset for automatic ordering of the next CSS asset.
            Passing `False` does not stop this asset from being ordered after the previous
            one, use `clear_last_css()` for that.
        """
        source_type = to_source_type(source_type)
        asset_type = to_asset_type(asset_type)

        metadata = self.get_metadata_defaults(asset_type)
        if options:
            metadata.replace(options)

        asset = asset_class_by_source_type[source_type](metadata, data, filters)

        if self._collection is not None:
            self.add(asset)

        if asset_type is AssetType.css and self._last_css_id not in (None, asset.id()):
            asset.after(self._last_css_id)

        if keep_last:
            self._last_css_id = asset.id()

        log.debug('Created %s %s asset %s', asset_type, source_type, asset.id())
        return asset

    def create_css(self, source_type, data, **kwargs):
        return self.create(AssetType.css, source_type, data, **kwargs)

    def create_js(self, source_type, data, **kwargs):
        return self.create(AssetType.js, source_type, data, **kwargs)

    def clear_last_css(self):
        """
        Forget the last CSS asset, so that the next CSS asset created starts a new ordering chain.
        """
        self._last_css_id = None
        return self

    clear_last_style = clear_last_css

    def get_collection(self):
        return self._collection

    def has_collection(self):
        return self._collection is not None

    def set_collection(self, collection):
        if self._locked:
            raise LockedException(
                'The collector instance is locked. A new collection cannot be attached to a locked collector.'
            )
        self._collection = collection
        return self

    def clear_collection(self):
        if self._locked:
            raise LockedException('The collector instance is locked. Collections cannot be cleared on a locked collector.')
        self._collection = None
        return self

    def lock(self, key):
        if self._locked:
            raise AlreadyLockedException('Collector is already locked.')
        self._locked = True
        self._lock_key = key
        log.debug('Locked %r', self)
        return True

    def unlock(self, key):
        if not self._locked:
            raise NotLockedException('Collector is not locked.')
        if not _same_key(self._lock_key, key):
            log.warning('Attempted to unlock %r with incorrect key', self)
            raise WrongKeyException('Attempted to unlock Collector with incorrect key.')
        self._locked = False
        self._lock_key = MISSING
        log.debug('Unlocked %r', self)
        return True

    def is_locked(self):
        return self._locked

    def set_default_metadata(self, metadata):
        if self._locked:
            raise LockedException(
                'The collector instance is locked. Asset defaults cannot be modified on a locked collector.'
            )
        if not isinstance(metadata, MetadataBag):
            raise InvalidTypeException(f'Default metadata must be a MetadataBag, got {metadata!r}')

        asset_type = to_asset_type(metadata.get_type())
        if asset_type is AssetType.css:
            self._default_css_metadata = metadata.clone()
        else:
            self._default_js_metadata = metadata.clone()
        return self

    def get_metadata_defaults(self, asset_type):
        """
        Get a copy of the default metadata for `asset_type`. Each asset gets a bag of its own,
        and the defaults held by the collector cannot be changed through the returned bag.
        """
        asset_type = to_asset_type(asset_type)
        if asset_type is AssetType.css:
            return self._default_css_metadata.clone()
        return self._default_js_metadata.clone()

    def restore_defaults(self):
        if self._locked:
            raise LockedException(
                'The collector instance is locked. Asset defaults cannot be modified on a locked collector.'
            )
        self._default_css_metadata = CssMetadataBag()
        self._default_js_metadata = JsMetadataBag()
        return self

    def __repr__(self):
        return f'<{type(self).__name__} locked={self._locked} collection={self._collection!r}>'
