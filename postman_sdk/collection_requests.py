"""Requests saved inside a collection, and their comments."""

from .config import Config
from .core import call
from .utils import build_query_string, require, validate_id, validate_uid


def create_request(config: Config, collection_id: str, request_data: dict, folder_id: str | None = None):
    """POST /collections/{collectionId}/requests, optionally into a folder.

    `request_data` uses the collection-format request fields (`name`,
    `method`, `url`, `headers`, `dataMode`, ...) and is sent as-is.
    """
    validate_id(collection_id, "collectionId")
    if folder_id is not None:
        validate_id(folder_id, "folderId")

    query = build_query_string({"folder": folder_id})
    return call(config, "post", f"/collections/{collection_id}/requests{query}", request_data)


def get_request(config: Config, collection_id: str, request_id: str, *, ids=None, uid=None, populate=None):
    validate_id(collection_id, "collectionId")
    validate_id(request_id, "requestId")

    query = build_query_string({"ids": ids, "uid": uid, "populate": populate})
    return call(config, "get", f"/collections/{collection_id}/requests/{request_id}{query}")


def update_request(config: Config, collection_id: str, request_id: str, request_data: dict):
    validate_id(collection_id, "collectionId")
    validate_id(request_id, "requestId")
    return call(config, "put", f"/collections/{collection_id}/requests/{request_id}", request_data)


def delete_request(config: Config, collection_id: str, request_id: str):
    validate_id(collection_id, "collectionId")
    validate_id(request_id, "requestId")
    return call(config, "delete", f"/collections/{collection_id}/requests/{request_id}")


def get_request_comments(config: Config, collection_uid: str, request_uid: str):
    validate_uid(collection_uid, "collectionUid")
    validate_uid(request_uid, "requestUid")
    return call(config, "get", f"/collections/{collection_uid}/requests/{request_uid}/comments")


def create_request_comment(config: Config, collection_uid: str, request_uid: str, comment_data: dict):
    validate_uid(collection_uid, "collectionUid")
    validate_uid(request_uid, "requestUid")
    return call(config, "post", f"/collections/{collection_uid}/requests/{request_uid}/comments", comment_data)


def update_request_comment(config: Config, collection_uid: str, request_uid: str, comment_id,
                           comment_data: dict):
    validate_uid(collection_uid, "collectionUid")
    validate_uid(request_uid, "requestUid")
    require(comment_id, "commentId")
    return call(
        config,
        "put",
        f"/collections/{collection_uid}/requests/{request_uid}/comments/{comment_id}",
        comment_data,
    )


def delete_request_comment(config: Config, collection_uid: str, request_uid: str, comment_id):
    validate_uid(collection_uid, "collectionUid")
    validate_uid(request_uid, "requestUid")
    require(comment_id, "commentId")
    return call(config, "delete", f"/collections/{collection_uid}/requests/{request_uid}/comments/{comment_id}")
