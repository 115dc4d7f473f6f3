from .config import Config
from .core import call
from .utils import build_query_string, require, validate_id, validate_uid


def get_collections(config: Config, workspace_id: str | None = None, *, name: str | None = None,
                    limit: int | None = None, offset: int | None = None):
    """GET /collections, optionally filtered by workspace and name."""
    if workspace_id is not None:
        validate_id(workspace_id, "workspaceId")

    query = build_query_string({
        "workspace": workspace_id,
        "name": name,
        "limit": limit,
        "offset": offset,
    })
    return call(config, "get", f"/collections{query}")


def create_collection(config: Config, collection_data: dict, workspace_id: str | None = None):
    """Create a collection via POST /collections?workspace=...

    `collection_data` is a v2.1.0 collection (`info`, `item`, ...) and is sent
    wrapped as `{"collection": collection_data}`. Without a workspace the API
    uses the oldest personal workspace.
    """
    if workspace_id is not None:
        validate_id(workspace_id, "workspaceId")

    query = build_query_string({"workspace": workspace_id})
    return call(config, "post", f"/collections{query}", {"collection": collection_data})


def get_collection(config: Config, collection_id: str, *, access_key: str | None = None,
                   model: str | None = None):
    validate_id(collection_id, "collectionId")

    query = build_query_string({"access_key": access_key, "model": model})
    return call(config, "get", f"/collections/{collection_id}{query}")


def update_collection(config: Config, collection_id: str, collection_data: dict, prefer: str | None = None):
    """Replace a collection via PUT /collections/{collectionId}.

    Pass `prefer="respond-async"` to have the API answer 202 and apply the
    update in the background.
    """
    validate_id(collection_id, "collectionId")

    extra = {"headers": {"Prefer": prefer}} if prefer is not None else None
    return call(config, "put", f"/collections/{collection_id}", {"collection": collection_data}, extra)


def modify_collection(config: Config, collection_id: str, partial_data: dict):
    """PATCH /collections/{collectionId} with name, description, events or variables."""
    validate_id(collection_id, "collectionId")
    return call(config, "patch", f"/collections/{collection_id}", {"collection": partial_data})


def delete_collection(config: Config, collection_id: str):
    validate_id(collection_id, "collectionId")
    return call(config, "delete", f"/collections/{collection_id}")


# Folders

def create_folder(config: Config, collection_id: str, folder_data: dict):
    validate_id(collection_id, "collectionId")
    return call(config, "post", f"/collections/{collection_id}/folders", folder_data)


def get_folder(config: Config, collection_id: str, folder_id: str, *, ids=None, uid=None, populate=None):
    validate_id(collection_id, "collectionId")
    validate_id(folder_id, "folderId")

    query = build_query_string({"ids": ids, "uid": uid, "populate": populate})
    return call(config, "get", f"/collections/{collection_id}/folders/{folder_id}{query}")


def update_folder(config: Config, collection_id: str, folder_id: str, folder_data: dict):
    validate_id(collection_id, "collectionId")
    validate_id(folder_id, "folderId")
    return call(config, "put", f"/collections/{collection_id}/folders/{folder_id}", folder_data)


def delete_folder(config: Config, collection_id: str, folder_id: str):
    validate_id(collection_id, "collectionId")
    validate_id(folder_id, "folderId")
    return call(config, "delete", f"/collections/{collection_id}/folders/{folder_id}")


# Comments are addressed by UID, not ID.

def get_collection_comments(config: Config, collection_uid: str):
    validate_uid(collection_uid, "collectionUid")
    return call(config, "get", f"/collections/{collection_uid}/comments")


def create_collection_comment(config: Config, collection_uid: str, comment_data: dict):
    """POST /collections/{collectionUid}/comments.

    `comment_data` holds `body` and optionally `threadId` to reply to an
    existing comment thread.
    """
    validate_uid(collection_uid, "collectionUid")
    return call(config, "post", f"/collections/{collection_uid}/comments", comment_data)


def update_collection_comment(config: Config, collection_uid: str, comment_id, comment_data: dict):
    validate_uid(collection_uid, "collectionUid")
    require(comment_id, "commentId")
    return call(config, "put", f"/collections/{collection_uid}/comments/{comment_id}", comment_data)


def delete_collection_comment(config: Config, collection_uid: str, comment_id):
    validate_uid(collection_uid, "collectionUid")
    require(comment_id, "commentId")
    return call(config, "delete", f"/collections/{collection_uid}/comments/{comment_id}")


def get_folder_comments(config: Config, collection_uid: str, folder_uid: str):
    validate_uid(collection_uid, "collectionUid")
    validate_uid(folder_uid, "folderUid")
    return call(config, "get", f"/collections/{collection_uid}/folders/{folder_uid}/comments")


def create_folder_comment(config: Config, collection_uid: str, folder_uid: str, comment_data: dict):
    validate_uid(collection_uid, "collectionUid")
    validate_uid(folder_uid, "folderUid")
    return call(config, "post", f"/collections/{collection_uid}/folders/{folder_uid}/comments", comment_data)


def update_folder_comment(config: Config, collection_uid: str, folder_uid: str, comment_id, comment_data: dict):
    validate_uid(collection_uid, "collectionUid")
    validate_uid(folder_uid, "folderUid")
    require(comment_id, "commentId")
    return call(
        config,
        "put",
        f"/collections/{collection_uid}/folders/{folder_uid}/comments/{comment_id}",
        comment_data,
    )


def delete_folder_comment(config: Config, collection_uid: str, folder_uid: str, comment_id):
    validate_uid(collection_uid, "collectionUid")
    validate_uid(folder_uid, "folderUid")
    require(comment_id, "commentId")
    return call(config, "delete", f"/collections/{collection_uid}/folders/{folder_uid}/comments/{comment_id}")


# Tags and roles

def get_collection_tags(config: Config, collection_uid: str):
    validate_uid(collection_uid, "collectionUid")
    return call(config, "get", f"/collections/{collection_uid}/tags")


def update_collection_tags(config: Config, collection_uid: str, tags: list):
    """Replace all tags: PUT /collections/{collectionUid}/tags with `[{"slug": ...}]`.

    An empty list removes every tag.
    """
    validate_uid(collection_uid, "collectionUid")
    return call(config, "put", f"/collections/{collection_uid}/tags", {"tags": tags})


def get_collection_roles(config: Config, collection_id: str):
    validate_id(collection_id, "collectionId")
    return call(config, "get", f"/collections/{collection_id}/roles")


def modify_collection_roles(config: Config, collection_id: str, operations: list):
    """PATCH /collections/{collectionId}/roles.

    `operations` is a list of `{"op": "update", "path": "/user", "value": [...]}`
    entries; the path selects user, group or team roles.
    """
    validate_id(collection_id, "collectionId")
    return call(config, "patch", f"/collections/{collection_id}/roles", {"roles": operations})


# Spec synchronization and generation

def sync_collection_with_spec(config: Config, collection_uid: str, spec_id: str):
    """Sync a collection generated from a spec: PUT /collections/{uid}/synchronizations?specId=...

    The API answers 202 with a task id; poll it with get_collection_task_status.
    """
    validate_uid(collection_uid, "collectionUid")
    validate_id(spec_id, "specId")

    query = build_query_string({"specId": spec_id})
    return call(config, "put", f"/collections/{collection_uid}/synchronizations{query}")


def create_collection_generation(config: Config, collection_uid: str, element_type: str, name: str,
                                 spec_type: str, file_format: str):
    """Generate a spec from a collection: POST /collections/{uid}/generations/{elementType}."""
    validate_uid(collection_uid, "collectionUid")
    require(element_type, "elementType")

    body = {"name": name, "type": spec_type, "format": file_format}
    return call(config, "post", f"/collections/{collection_uid}/generations/{element_type}", body)


def get_collection_generations(config: Config, collection_uid: str, element_type: str):
    validate_uid(collection_uid, "collectionUid")
    require(element_type, "elementType")
    return call(config, "get", f"/collections/{collection_uid}/generations/{element_type}")


def get_collection_task_status(config: Config, collection_uid: str, task_id: str):
    validate_uid(collection_uid, "collectionUid")
    validate_id(task_id, "taskId")
    return call(config, "get", f"/collections/{collection_uid}/tasks/{task_id}")


# Forks

def get_collection_forks(config: Config, *, cursor: str | None = None, direction: str | None = None,
                         limit: int | None = None):
    """GET /collections/collection-forks: forks created by the authenticated user."""
    query = build_query_string({"cursor": cursor, "direction": direction, "limit": limit})
    return call(config, "get", f"/collections/collection-forks{query}")


def create_collection_fork(config: Config, collection_id: str, workspace_id: str, label: str):
    validate_id(collection_id, "collectionId")
    validate_id(workspace_id, "workspaceId")

    query = build_query_string({"workspace": workspace_id})
    return call(config, "post", f"/collections/fork/{collection_id}{query}", {"label": label})


def merge_collection_fork(config: Config, source_uid: str, destination_uid: str, strategy: str | None = None):
    """Merge a fork into its parent: POST /collections/merge.

    `strategy` is `deleteSource` or `updateSourceWithDestination`; when None
    the API default applies.
    """
    validate_uid(source_uid, "sourceUid")
    validate_uid(destination_uid, "destinationUid")

    body = {"source": source_uid, "destination": destination_uid}
    if strategy is not None:
        body["strategy"] = strategy
    return call(config, "post", "/collections/merge", body)


def pull_collection_changes(config: Config, collection_id: str):
    """Pull the parent's changes into a fork: PUT /collections/{collectionId}/pulls."""
    validate_id(collection_id, "collectionId")
    return call(config, "put", f"/collections/{collection_id}/pulls")