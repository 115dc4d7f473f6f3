from .config import Config
from .core import call
from .utils import build_query_string, validate_id, validate_uid


def get_monitors(config: Config, *, workspace_id: str | None = None, active: bool | None = None,
                 owner: int | None = None, collection_uid: str | None = None,
                 environment_uid: str | None = None, cursor: str | None = None, limit: int | None = None):
    if workspace_id is not None:
        validate_id(workspace_id, "workspaceId")
    if collection_uid is not None:
        validate_uid(collection_uid, "collectionUid")
    if environment_uid is not None:
        validate_uid(environment_uid, "environmentUid")

    query = build_query_string({
        "workspace": workspace_id,
        "active": active,
        "owner": owner,
        "collectionUid": collection_uid,
        "environmentUid": environment_uid,
        "cursor": cursor,
        "limit": limit,
    })
    return call(config, "get", f"/monitors{query}")


def create_monitor(config: Config, monitor_data: dict, workspace_id: str):
    """Create a monitor via POST /monitors?workspace=...

    `monitor_data` carries `name`, `collection` (UID) and a `schedule` with a
    cron expression and timezone; `environment` and `options` are optional.
    """
    validate_id(workspace_id, "workspaceId")

    query = build_query_string({"workspace": workspace_id})
    return call(config, "post", f"/monitors{query}", {"monitor": monitor_data})


def get_monitor(config: Config, monitor_id: str):
    validate_id(monitor_id, "monitorId")
    return call(config, "get", f"/monitors/{monitor_id}")


def update_monitor(config: Config, monitor_id: str, monitor_data: dict):
    validate_id(monitor_id, "monitorId")
    return call(config, "put", f"/monitors/{monitor_id}", {"monitor": monitor_data})


def delete_monitor(config: Config, monitor_id: str):
    validate_id(monitor_id, "monitorId")
    return call(config, "delete", f"/monitors/{monitor_id}")


def run_monitor(config: Config, monitor_id: str, run_async: bool | None = None):
    """POST /monitors/{monitorId}/run.

    With `run_async=True` the response has no stats, executions or failures;
    fetch them later with get_monitor.
    """
    validate_id(monitor_id, "monitorId")

    query = build_query_string({"async": run_async})
    return call(config, "post", f"/monitors/{monitor_id}/run{query}")
