"""Example responses attached to a collection's requests, and their comments."""

from .config import Config
from .core import call
from .utils import build_query_string, require, validate_id, validate_uid


def create_response(config: Config, collection_id: str, request_id: str, response_data: dict):
    """POST /collections/{collectionId}/responses?request={requestId}."""
    validate_id(collection_id, "collectionId")
    validate_id(request_id, "requestId")

    query = build_query_string({"request": request_id})
    return call(config, "post", f"/collections/{collection_id}/responses{query}", response_data)


def get_response(config: Config, collection_id: str, response_id: str, *, ids=None, uid=None, populate=None):
    validate_id(collection_id, "collectionId")
    validate_id(response_id, "responseId")

    query = build_query_string({"ids": ids, "uid": uid, "populate": populate})
    return call(config, "get", f"/collections/{collection_id}/responses/{response_id}{query}")


def update_response(config: Config, collection_id: str, response_id: str, response_data: dict):
    validate_id(collection_id, "collectionId")
    validate_id(response_id, "responseId")
    return call(config, "put", f"/collections/{collection_id}/responses/{response_id}", response_data)


def delete_response(config: Config, collection_id: str, response_id: str):
    validate_id(collection_id, "collectionId")
    validate_id(response_id, "responseId")
    return call(config, "delete", f"/collections/{collection_id}/responses/{response_id}")


def get_response_comments(config: Config, collection_uid: str, response_uid: str):
    validate_uid(collection_uid, "collectionUid")
    validate_uid(response_uid, "responseUid")
    return call(config, "get", f"/collections/{collection_uid}/responses/{response_uid}/comments")


def create_response_comment(config: Config, collection_uid: str, response_uid: str, comment_data: dict):
    validate_uid(collection_uid, "collectionUid")
    validate_uid(response_uid, "responseUid")
    return call(config, "post", f"/collections/{collection_uid}/responses/{response_uid}/comments", comment_data)


def update_response_comment(config: Config, collection_uid: str, response_uid: str, comment_id,
                            comment_data: dict):
    validate_uid(collection_uid, "collectionUid")
    validate_uid(response_uid, "responseUid")
    require(comment_id, "commentId")
    return call(
        config,
        "put",
        f"/collections/{collection_uid}/responses/{response_uid}/comments/{comment_id}",
        comment_data,
    )


def delete_response_comment(config: Config, collection_uid: str, response_uid: str, comment_id):
    validate_uid(collection_uid, "collectionUid")
    validate_uid(response_uid, "responseUid")
    require(comment_id, "commentId")
    return call(config, "delete", f"/collections/{collection_uid}/responses/{response_uid}/comments/{comment_id}")
