import hashlib
import os

import pytest
from freezegun import freeze_time

from assetbag.asset import (
    ExternalAsset,
    FileAsset,
    StringAsset,
)
from assetbag.base import (
    AssetType,
    InvalidArgumentException,
)
from assetbag.metadata import (
    CssMetadataBag,
    JsMetadataBag,
)
from tests.helpers import (
    strip,
    upper,
)


def test_string_asset_id_is_content_hash():
    a = StringAsset(CssMetadataBag(), 'body { color: red; }')
    b = StringAsset(JsMetadataBag(), 'body { color: red; }')

    assert a.id() == hashlib.sha256(b'body { color: red; }').hexdigest()
    assert a.id() == b.id()
    assert a.id() != StringAsset(CssMetadataBag(), 'body { color: blue; }').id()


def test_string_asset_empty_content_gets_random_id():
    ids = {StringAsset(CssMetadataBag(), '').id() for _ in range(5)}
    assert len(ids) == 5
    for x in ids:
        assert len(x) == 64


def test_string_asset_random_id_length_setting(settings):
    settings.ASSETBAG_RANDOM_ID_LENGTH = 8
    assert StringAsset(CssMetadataBag(), '').id() != StringAsset(CssMetadataBag(), '').id()


@pytest.mark.parametrize('content', [None, 17, b'body {}', ['body {}']])
def test_string_asset_requires_text(content):
    with pytest.raises(InvalidArgumentException) as e:
        StringAsset(CssMetadataBag(), content)

    assert str(e.value) == 'StringAsset requires a string for its content.'


def test_string_asset_id_does_not_change_with_content():
    asset = StringAsset(CssMetadataBag(), 'a {}')
    original_id = asset.id()

    asset.set_content('b {}')
    asset.get_metadata().set('media', 'print')

    assert asset.id() == original_id
    assert asset.get_content() == 'b {}'


@freeze_time('2013-05-01 12:00:00')
def test_string_asset_last_modified():
    asset = StringAsset(CssMetadataBag(), 'a {}')
    assert asset.get_last_modified() == 1367409600

    original_id = asset.id()
    assert asset.set_last_modified(1234) is asset
    assert asset.get_last_modified() == 1234
    assert asset.id() == original_id


def test_string_asset_load_applies_filters():
    asset = StringAsset(CssMetadataBag(), '  a { }  ', filters=[strip])
    asset.load()
    assert asset.get_content() == 'a { }'

    asset.load(upper)
    assert asset.get_content() == 'A { }'


def test_dump():
    asset = StringAsset(CssMetadataBag(), 'a {}')
    assert asset.dump() == 'a {}'
    assert asset.dump(upper) == 'A {}'
    assert asset.get_content() == 'a {}'


def test_filters():
    asset = StringAsset(CssMetadataBag(), 'a {}', filters=[upper])
    asset.ensure_filter(upper)
    asset.ensure_filter(strip)
    assert asset.get_filters() == [upper, strip]

    asset.clear_filters()
    assert asset.get_filters() == []

    with pytest.raises(InvalidArgumentException):
        asset.ensure_filter('upper')


def test_asset_requires_metadata_bag():
    with pytest.raises(InvalidArgumentException):
        StringAsset(dict(media='all'), 'a {}')


def test_asset_type_and_preprocessable_come_from_metadata():
    asset = StringAsset(JsMetadataBag(), 'var a;')
    assert asset.get_asset_type() is AssetType.js
    assert asset.is_preprocessable()

    asset.get_metadata().set('preprocess', False)
    assert not asset.is_preprocessable()


def test_after():
    a = StringAsset(CssMetadataBag(), 'a {}')
    b = StringAsset(CssMetadataBag(), 'b {}')
    c = StringAsset(CssMetadataBag(), 'c {}')

    assert not b.has_predecessors()
    assert b.after(a) is b
    b.after(a)
    c.after(b.id())

    assert b.get_predecessors() == {a.id()}
    assert c.get_predecessors() == {b.id()}
    assert not a.has_predecessors()


def test_after_invalid():
    a = StringAsset(CssMetadataBag(), 'a {}')
    with pytest.raises(InvalidArgumentException):
        a.after(a)
    with pytest.raises(InvalidArgumentException):
        a.after(17)


def test_file_asset_id_is_normalized_absolute_path(settings, tmp_path):
    settings.ASSETBAG_FILE_ROOT = str(tmp_path)

    a = FileAsset(CssMetadataBag(), 'css/base.css')
    b = FileAsset(CssMetadataBag(), 'css/../css/./base.css')
    c = FileAsset(CssMetadataBag(), str(tmp_path / 'css' / 'base.css'))

    assert a.id() == os.path.join(str(tmp_path), 'css', 'base.css')
    assert a.id() == b.id() == c.id()
    assert a.get_source_path() == a.id()


def test_file_asset_id_with_relative_file_root(settings, tmp_path, monkeypatch):
    settings.ASSETBAG_FILE_ROOT = 'static'
    monkeypatch.chdir(tmp_path)

    asset = FileAsset(CssMetadataBag(), 'x.css')
    assert os.path.isabs(asset.id())
    assert asset.id() == os.path.join(os.getcwd(), 'static', 'x.css')

    # the id is fixed when the asset is created
    original_id = asset.id()
    monkeypatch.chdir(tmp_path.parent)
    assert asset.id() == original_id
    assert asset.id() == FileAsset(CssMetadataBag(), original_id).id()


def test_file_asset_id_is_not_content_based(tmp_path):
    (tmp_path / 'a.css').write_text('a {}')
    (tmp_path / 'b.css').write_text('a {}')

    assert FileAsset(CssMetadataBag(), tmp_path / 'a.css').id() != FileAsset(CssMetadataBag(), tmp_path / 'b.css').id()


def test_file_asset_stream_wrapper_uri_is_kept():
    asset = FileAsset(CssMetadataBag(), 'public://css/base.css')
    assert asset.id() == 'public://css/base.css'
    assert asset.is_stream_wrapper()
    assert not FileAsset(CssMetadataBag(), 'css/base.css').is_stream_wrapper()


def test_file_asset_stream_wrapper_uri_cannot_be_read():
    asset = FileAsset(CssMetadataBag(), 'public://css/base.css')

    with pytest.raises(InvalidArgumentException) as e:
        asset.load()
    assert str(e.value) == 'public://css/base.css is a stream wrapper uri and cannot be read from the local file system'

    with pytest.raises(InvalidArgumentException):
        asset.get_last_modified()
    assert asset.get_content() is None


def test_file_asset_load(tmp_path):
    path = tmp_path / 'base.css'
    path.write_text(' body { color: black; } ', encoding='utf-8')

    asset = FileAsset(CssMetadataBag(), str(path), filters=[strip])
    assert asset.get_content() is None

    asset.load()
    assert asset.get_content() == 'body { color: black; }'

    path.write_text('p {}', encoding='utf-8')
    asset.load(upper)
    assert asset.get_content() == 'P {}'
    assert asset.get_last_modified() == os.path.getmtime(str(path))


def test_file_asset_relative_to_file_root():
    asset = FileAsset(CssMetadataBag(), 'css/base.css')
    assert asset.dump() == 'body { color: black; }\n'


def test_file_asset_missing_file(tmp_path):
    asset = FileAsset(CssMetadataBag(), str(tmp_path / 'nope.css'))
    with pytest.raises(FileNotFoundError):
        asset.load()


@pytest.mark.parametrize('source', [None, '', 17])
def test_file_asset_invalid_source(source):
    with pytest.raises(InvalidArgumentException):
        FileAsset(CssMetadataBag(), source)


def test_external_asset():
    asset = ExternalAsset(JsMetadataBag(), 'https://cdn.example.com/lib.js')
    assert asset.id() == 'https://cdn.example.com/lib.js'
    assert asset.get_source_url() == 'https://cdn.example.com/lib.js'
    assert asset.get_last_modified() is None

    asset.load(upper)
    assert asset.get_content() is None
    assert asset.dump() is None


def test_external_asset_is_never_preprocessable():
    asset = ExternalAsset(CssMetadataBag(dict(preprocess=True)), '//fonts.example.com/font.css')
    assert asset.get_metadata().get('preprocess') is True
    assert not asset.is_preprocessable()


@pytest.mark.parametrize('source', ['css/base.css', '/css/base.css', '', None])
def test_external_asset_requires_absolute_url(source):
    with pytest.raises(InvalidArgumentException):
        ExternalAsset(CssMetadataBag(), source)


def test_repr():
    asset = ExternalAsset(JsMetadataBag(), 'https://cdn.example.com/lib.js')
    assert repr(asset) == '<ExternalAsset js https://cdn.example.com/lib.js>'
