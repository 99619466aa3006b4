import os
from enum import Enum

from django.conf import settings


class AssetBagException(Exception):
    pass


class InvalidArgumentException(AssetBagException, ValueError):
    pass


class InvalidTypeException(InvalidArgumentException):
    pass


class NoCollectionAttachedException(AssetBagException):
    pass


class LockException(AssetBagException):
    pass


class LockedException(LockException):
    pass


class AlreadyLockedException(LockException):
    pass


class NotLockedException(LockException):
    pass


class WrongKeyException(LockException):
    pass


class FrozenException(AssetBagException):
    pass


class UnknownMissingValueException(Exception):
    pass


class Missing:
    def __bool__(self):
        raise UnknownMissingValueException('MISSING is neither True nor False, it is unknown')

    def __str__(self):
        return 'MISSING'

    def __repr__(self):
        return str(self)


MISSING = Missing()


class AssetType(str, Enum):
    css = 'css'
    js = 'js'

    def __str__(self):
        return self.value


class SourceType(str, Enum):
    file = 'file'
    string = 'string'
    external = 'external'

    def __str__(self):
        return self.value


_asset_type_aliases = {
    'style': AssetType.css,
    'script': AssetType.js,
}

_source_type_aliases = {
    'inline': SourceType.string,
}


def to_asset_type(asset_type, exception_class=InvalidTypeException):
    """
    Normalize `asset_type` to an `AssetType`. `'style'` and `'script'` are accepted as
    aliases for `'css'` and `'js'`.
    """
    if isinstance(asset_type, AssetType):
        return asset_type
    if isinstance(asset_type, str):
        asset_type = _asset_type_aliases.get(asset_type, asset_type)
        try:
            return AssetType(asset_type)
        except ValueError:
            pass
    raise exception_class(f'Only assets of type "js" or "css" are supported, "{asset_type}" requested.')


def to_source_type(source_type):
    if isinstance(source_type, SourceType):
        return source_type
    if isinstance(source_type, str):
        source_type = _source_type_aliases.get(source_type, source_type)
        try:
            return SourceType(source_type)
        except ValueError:
            pass
    raise InvalidArgumentException(
        f'Only sources of type "file", "string", or "external" are allowed, "{source_type}" requested.'
    )


def get_setting(name, default=None):
    if not settings.configured:
        return default
    return getattr(settings, name, default)


def get_file_root():
    base_dir = get_setting('BASE_DIR') or os.getcwd()
    return str(get_setting('ASSETBAG_FILE_ROOT') or base_dir)


# Turns out len(x) is a good idea, and x.values() is a bad idea. Let's do it the way it should be done.
def values(container):
    return type(container).values(container)


def items(container):
    return type(container).items(container)


def keys(container):
    return type(container).keys(container)
