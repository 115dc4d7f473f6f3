from .config import Config
from .core import call
from .utils import build_query_string, require, validate_id


def get_workspaces(config: Config, *, workspace_type: str | None = None, created_by: int | None = None,
                   include: str | None = None):
    """GET /workspaces.

    `workspace_type` is one of personal, team, private, public or partner;
    `include` accepts `mocks:deactivated` or `scim`.
    """
    query = build_query_string({"type": workspace_type, "createdBy": created_by, "include": include})
    return call(config, "get", f"/workspaces{query}")


def create_workspace(config: Config, name: str, workspace_type: str, description: str | None = None,
                     about: str | None = None):
    require(name, "name")
    require(workspace_type, "type")

    workspace = {"name": name, "type": workspace_type}
    if description is not None:
        workspace["description"] = description
    if about is not None:
        workspace["about"] = about
    return call(config, "post", "/workspaces", {"workspace": workspace})


def get_workspace(config: Config, workspace_id: str, include: str | None = None):
    validate_id(workspace_id, "workspaceId")

    query = build_query_string({"include": include})
    return call(config, "get", f"/workspaces/{workspace_id}{query}")


def update_workspace(config: Config, workspace_id: str, *, name: str | None = None,
                     workspace_type: str | None = None, description: str | None = None,
                     about: str | None = None):
    """Update a workspace via PUT /workspaces/{workspaceId}.

    The API rejects a PUT without `type`, so the current workspace is fetched
    first and any field left as None keeps its current value.
    """
    validate_id(workspace_id, "workspaceId")

    current = (get_workspace(config, workspace_id).json() or {}).get("workspace") or {}
    workspace = {
        "name": name if name is not None else current.get("name"),
        "type": workspace_type if workspace_type is not None else current.get("type"),
        "description": description if description is not None else current.get("description"),
        "about": about if about is not None else current.get("about"),
    }
    return call(config, "put", f"/workspaces/{workspace_id}", {"workspace": workspace})


def delete_workspace(config: Config, workspace_id: str):
    validate_id(workspace_id, "workspaceId")
    return call(config, "delete", f"/workspaces/{workspace_id}")


def get_workspace_tags(config: Config, workspace_id: str):
    validate_id(workspace_id, "workspaceId")
    return call(config, "get", f"/workspaces/{workspace_id}/tags")


def update_workspace_tags(config: Config, workspace_id: str, tags: list):
    """Replace the workspace's tags (at most five `{"slug": ...}` entries)."""
    validate_id(workspace_id, "workspaceId")
    return call(config, "put", f"/workspaces/{workspace_id}/tags", {"tags": tags})
