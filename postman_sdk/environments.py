from .config import Config
from .core import UNSET, call
from .utils import build_query_string, validate_id, validate_uid


def get_environments(config: Config, workspace_id: str | None = None):
    if workspace_id is not None:
        validate_id(workspace_id, "workspaceId")

    query = build_query_string({"workspace": workspace_id})
    return call(config, "get", f"/environments{query}")


def create_environment(config: Config, environment_data: dict, workspace_id: str | None = None):
    """POST /environments?workspace=... with `{"environment": {"name": ..., "values": [...]}}`."""
    if workspace_id is not None:
        validate_id(workspace_id, "workspaceId")

    query = build_query_string({"workspace": workspace_id})
    return call(config, "post", f"/environments{query}", {"environment": environment_data})


def get_environment(config: Config, environment_id: str):
    validate_id(environment_id, "environmentId")
    return call(config, "get", f"/environments/{environment_id}")


def modify_environment(config: Config, environment_id: str, patch_operations: list):
    """PATCH /environments/{environmentId} with JSON-Patch style operations."""
    validate_id(environment_id, "environmentId")
    return call(config, "patch", f"/environments/{environment_id}", patch_operations)


def delete_environment(config: Config, environment_id: str):
    validate_id(environment_id, "environmentId")
    return call(config, "delete", f"/environments/{environment_id}")


def get_environment_forks(config: Config, environment_uid: str, *, cursor: str | None = None,
                          direction: str | None = None, limit: int | None = None, sort: str | None = None):
    validate_uid(environment_uid, "environmentUid")

    query = build_query_string({"cursor": cursor, "direction": direction, "limit": limit, "sort": sort})
    return call(config, "get", f"/environments/{environment_uid}/forks{query}")


def create_environment_fork(config: Config, environment_uid: str, workspace_id: str, fork_name: str):
    validate_uid(environment_uid, "environmentUid")
    validate_id(workspace_id, "workspaceId")

    query = build_query_string({"workspace": workspace_id})
    return call(config, "post", f"/environments/{environment_uid}/forks{query}", {"forkName": fork_name})


def merge_environment_fork(config: Config, environment_uid: str, data=UNSET):
    """POST /environments/{environmentUid}/merges; `data` names the source fork and strategy."""
    validate_uid(environment_uid, "environmentUid")
    return call(config, "post", f"/environments/{environment_uid}/merges", data)


def pull_environment_changes(config: Config, environment_uid: str, data=UNSET):
    validate_uid(environment_uid, "environmentUid")
    return call(config, "post", f"/environments/{environment_uid}/pulls", data)
