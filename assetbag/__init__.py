__version__ = '0.1.0'

from assetbag.asset import (
    BaseAsset,
    ExternalAsset,
    FileAsset,
    StringAsset,
)
from assetbag.base import (
    AlreadyLockedException,
    AssetBagException,
    AssetType,
    FrozenException,
    InvalidArgumentException,
    InvalidTypeException,
    LockedException,
    LockException,
    NoCollectionAttachedException,
    NotLockedException,
    SourceType,
    WrongKeyException,
)
from assetbag.collection import AssetCollection
from assetbag.collector import AssetCollector
from assetbag.library import AssetLibrary
from assetbag.metadata import (
    CssMetadataBag,
    JsMetadataBag,
    MetadataBag,
)
from assetbag.sort_after import SortAfterException

__all__ = [
    'AlreadyLockedException',
    'AssetBagException',
    'AssetCollection',
    'AssetCollector',
    'AssetLibrary',
    'AssetType',
    'BaseAsset',
    'CssMetadataBag',
    'ExternalAsset',
    'FileAsset',
    'FrozenException',
    'InvalidArgumentException',
    'InvalidTypeException',
    'JsMetadataBag',
    'LockedException',
    'LockException',
    'MetadataBag',
    'NoCollectionAttachedException',
    'NotLockedException',
    'SortAfterException',
    'SourceType',
    'StringAsset',
    'WrongKeyException',
]
