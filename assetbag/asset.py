import hashlib
import os
import time
from urllib.parse import urlsplit

from django.utils.crypto import get_random_string

from assetbag.base import (
    get_file_root,
    get_setting,
    InvalidArgumentException,
)
from assetbag.metadata import MetadataBag


def content_hash(content):
    return hashlib.sha256(content.encode('utf-8')).hexdigest()


def random_id():
    return content_hash(get_random_string(get_setting('ASSETBAG_RANDOM_ID_LENGTH', 32)))


class BaseAsset:
    # language=rst
    """
    Base class for the CSS and JS assets created by :doc:`AssetCollector`.

    An asset wraps a source (a file, a string or an external url), its :doc:`MetadataBag`,
    a list of filters and a set of ordering predecessors. The id of an asset is computed
    once when it is created and never changes after that.

    Filters are plain callables that take the content as a string and return the
    transformed content. They are applied in order by `load()`.
    """

    def __init__(self, metadata, filters=None):
        if not isinstance(metadata, MetadataBag):
            raise InvalidArgumentException(f'{type(self).__name__} requires a MetadataBag, got {metadata!r}')
        self._metadata = metadata
        self._filters = []
        for f in filters or []:
            self.ensure_filter(f)
        self._content = None
        self._predecessors = set()

    def id(self):
        raise NotImplementedError()  # pragma: no cover

    def load(self, additional_filter=None):
        raise NotImplementedError()  # pragma: no cover

    def get_asset_type(self):
        return self._metadata.get_type()

    def get_metadata(self):
        return self._metadata

    def is_preprocessable(self):
        return bool(self._metadata.get('preprocess', False))

    def get_last_modified(self):
        return None

    def get_filters(self):
        return list(self._filters)

    def ensure_filter(self, f):
        if not callable(f):
            raise InvalidArgumentException(f'Filters must be callable, got {f!r}')
        if f not in self._filters:
            self._filters.append(f)
        return self

    def clear_filters(self):
        self._filters = []
        return self

    def get_content(self):
        return self._content

    def set_content(self, content):
        self._content = content
        return self

    def _do_load(self, content, additional_filter=None):
        for f in self._filters:
            content = f(content)
        if additional_filter is not None:
            content = additional_filter(content)
        self._content = content

    def dump(self, additional_filter=None):
        if self._content is None:
            self.load()
        content = self._content
        if additional_filter is not None and content is not None:
            content = additional_filter(content)
        return content

    def after(self, other):
        """Declare that this asset must be rendered after `other` (an asset or an asset id)."""
        other_id = other.id() if isinstance(other, BaseAsset) else other
        if not isinstance(other_id, str):
            raise InvalidArgumentException(f'after() requires an asset or an asset id, got {other!r}')
        if other_id == self.id():
            raise InvalidArgumentException('An asset cannot be ordered after itself')
        self._predecessors.add(other_id)
        return self

    def get_predecessors(self):
        return frozenset(self._predecessors)

    def has_predecessors(self):
        return bool(self._predecessors)

    def __repr__(self):
        return f'<{type(self).__name__} {self.get_asset_type()} {self.id()}>'


class FileAsset(BaseAsset):
    """
    An asset read from the local file system. Relative paths are resolved against
    `ASSETBAG_FILE_ROOT`. Stream wrapper uris like `public://foo.css` are kept as is and
    serve only as ids: such an asset cannot be loaded or stat'ed locally.
    """

    def __init__(self, metadata, source, filters=None):
        if not isinstance(source, (str, os.PathLike)) or not os.fspath(source):
            raise InvalidArgumentException(f'FileAsset requires a path for its source, got {source!r}')
        source = os.fspath(source)
        if '://' in source:
            self._id = source
        else:
            self._id = os.path.abspath(os.path.join(get_file_root(), source))
        self._source = source
        super().__init__(metadata, filters)

    def id(self):
        return self._id

    def get_source_path(self):
        return self._id

    def is_stream_wrapper(self):
        return '://' in self._id

    def _local_path(self):
        if self.is_stream_wrapper():
            raise InvalidArgumentException(f'{self._id} is a stream wrapper uri and cannot be read from the local file system')
        return self._id

    def get_last_modified(self):
        return os.path.getmtime(self._local_path())

    def load(self, additional_filter=None):
        with open(self._local_path(), encoding=get_setting('ASSETBAG_FILE_ENCODING', 'utf-8')) as f:
            content = f.read()
        self._do_load(content, additional_filter)


class StringAsset(BaseAsset):
    """
    An asset with its content given inline. The id is the sha256 of the content as it was
    at construction. Empty content has no useful fingerprint, so it gets a random id instead.
    """

    def __init__(self, metadata, content, filters=None):
        if not isinstance(content, str):
            raise InvalidArgumentException('StringAsset requires a string for its content.')

        self._id = content_hash(content) if content else random_id()
        self._last_modified = int(time.time())
        super().__init__(metadata, filters)
        self.set_content(content)

    def id(self):
        return self._id

    def set_last_modified(self, last_modified):
        self._last_modified = last_modified
        return self

    def get_last_modified(self):
        return self._last_modified

    def load(self, additional_filter=None):
        self._do_load(self.get_content(), additional_filter)


class ExternalAsset(BaseAsset):
    """
    An asset served from somewhere else. It can never be loaded or preprocessed locally.
    """

    def __init__(self, metadata, source_url, filters=None):
        if not isinstance(source_url, str) or not urlsplit(source_url).netloc:
            raise InvalidArgumentException(f'ExternalAsset requires an absolute url, got {source_url!r}')
        self._source_url = source_url
        super().__init__(metadata, filters)

    def id(self):
        return self._source_url

    def get_source_url(self):
        return self._source_url

    def is_preprocessable(self):
        return False

    def load(self, additional_filter=None):
        pass
