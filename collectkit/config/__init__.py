from .collection import CollectionSettings, collection_settings, get_collection_settings

__all__ = [
    "CollectionSettings",
    "collection_settings",
    "get_collection_settings",
]
