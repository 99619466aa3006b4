from assetbag import (
    AssetCollection,
    AssetCollector,
)


def upper(content):
    return content.upper()


def strip(content):
    return content.strip()


def collector_with_collection():
    collection = AssetCollection()
    return AssetCollector(collection), collection


def ids(assets):
    return [x.id() for x in assets]
