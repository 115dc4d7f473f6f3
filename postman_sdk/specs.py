from urllib.parse import quote

import yaml

from .config import Config
from .core import call
from .utils import build_query_string, get_content_fs, require, validate_id, validate_uid

DEFAULT_GENERATION_OPTIONS = {
    "requestNameSource": "Fallback",
    "indentCharacter": "Space",
    "parametersResolution": "Example",
    "folderStrategy": "Paths",
    "includeAuthInfoInExample": True,
    "enableOptionalParameters": True,
    "keepImplicitHeaders": False,
    "includeDeprecated": True,
    "alwaysInheritAuthentication": False,
    "nestedFolderHierarchy": False,
}


def infer_spec_type(raw_spec: str) -> str:
    """Infer the Spec Hub `type` from an OpenAPI or AsyncAPI document.

    Postman expects values like OPENAPI:3.0, OPENAPI:3.1, OPENAPI:2.0 or
    ASYNCAPI:2.0. Unparseable or unversioned documents default to OPENAPI:3.0.
    """
    try:
        spec = yaml.safe_load(raw_spec) or {}
    except yaml.YAMLError:
        spec = {}
    if not isinstance(spec, dict):
        spec = {}

    if spec.get("asyncapi"):
        return "ASYNCAPI:2.0"

    v = str(spec.get("openapi") or spec.get("swagger") or "")
    if v.startswith("3.1"):
        return "OPENAPI:3.1"
    if v.startswith("3.0"):
        return "OPENAPI:3.0"
    if v.startswith("2."):
        return "OPENAPI:2.0"
    return "OPENAPI:3.0"


def _file_endpoint(spec_id: str, file_path: str) -> str:
    # Spec file paths may contain "/" and must travel as a single segment.
    return f"/specs/{spec_id}/files/{quote(file_path, safe='')}"


def get_specs(config: Config, workspace_id: str, *, cursor: str | None = None, limit: int | None = None):
    validate_id(workspace_id, "workspaceId")

    query = build_query_string({"workspaceId": workspace_id, "cursor": cursor, "limit": limit})
    return call(config, "get", f"/specs{query}")


def get_spec(config: Config, spec_id: str):
    validate_id(spec_id, "specId")
    return call(config, "get", f"/specs/{spec_id}")


def create_spec(config: Config, workspace_id: str, name: str, spec_type: str, files: list):
    """Create a Spec Hub spec via POST /specs?workspaceId=...

    Postman expects a payload shaped like:
      {
        "name": "...",
        "type": "OPENAPI:3.0",
        "files": [{"path": "index.yaml", "content": "..."}]
      }

    Multi-file specs mark the entry point with `"type": "ROOT"`.
    """
    validate_id(workspace_id, "workspaceId")
    require(name, "name")
    require(spec_type, "type")

    query = build_query_string({"workspaceId": workspace_id})
    body = {"name": name, "type": spec_type, "files": files}
    return call(config, "post", f"/specs{query}", body)


def modify_spec(config: Config, spec_id: str, name: str):
    validate_id(spec_id, "specId")
    return call(config, "patch", f"/specs/{spec_id}", {"name": name})


def delete_spec(config: Config, spec_id: str):
    validate_id(spec_id, "specId")
    return call(config, "delete", f"/specs/{spec_id}")


def get_spec_definition(config: Config, spec_id: str):
    """GET /specs/{specId}/definitions: the whole spec resolved into one document."""
    validate_id(spec_id, "specId")
    return call(config, "get", f"/specs/{spec_id}/definitions")


def get_spec_files(config: Config, spec_id: str):
    validate_id(spec_id, "specId")
    return call(config, "get", f"/specs/{spec_id}/files")


def create_spec_file(config: Config, spec_id: str, file_path: str, content: str):
    validate_id(spec_id, "specId")
    require(file_path, "filePath")
    return call(config, "post", f"/specs/{spec_id}/files", {"path": file_path, "content": content})


def get_spec_file(config: Config, spec_id: str, file_path: str):
    validate_id(spec_id, "specId")
    require(file_path, "filePath")
    return call(config, "get", _file_endpoint(spec_id, file_path))


def modify_spec_file(config: Config, spec_id: str, file_path: str, data: dict):
    """PATCH a spec file. `data` carries one of `content`, `name` or `type`."""
    validate_id(spec_id, "specId")
    require(file_path, "filePath")
    return call(config, "patch", _file_endpoint(spec_id, file_path), data)


def delete_spec_file(config: Config, spec_id: str, file_path: str):
    validate_id(spec_id, "specId")
    require(file_path, "filePath")
    return call(config, "delete", _file_endpoint(spec_id, file_path))


def update_spec_file_from_path(config: Config, spec_id: str, file_path: str, source_file_path,
                               extra: dict | None = None):
    """Replace a spec file's content with the content of a local file."""
    validate_id(spec_id, "specId")
    require(file_path, "filePath")

    body = get_content_fs(source_file_path)
    return call(config, "patch", _file_endpoint(spec_id, file_path), body, extra)


def create_spec_generation(config: Config, spec_id: str, element_type: str = "collection",
                           name: str | None = None, options: dict | None = None):
    """Generate a collection from a spec: POST /specs/{specId}/generations/{elementType}.

    Without a name the spec's own name is used, which costs one extra GET.
    `options` override DEFAULT_GENERATION_OPTIONS key by key.
    """
    validate_id(spec_id, "specId")
    require(element_type, "elementType")

    if not name:
        name = (get_spec(config, spec_id).json() or {}).get("name")
        if not name:
            raise RuntimeError(f"Unable to retrieve spec name for specId: {spec_id}")

    merged = dict(DEFAULT_GENERATION_OPTIONS)
    if options:
        merged.update(options)

    body = {"name": name, "options": merged}
    return call(config, "post", f"/specs/{spec_id}/generations/{element_type}", body)


def get_spec_generations(config: Config, spec_id: str, element_type: str = "collection", *,
                         limit: int | None = None, cursor: str | None = None):
    validate_id(spec_id, "specId")
    require(element_type, "elementType")

    query = build_query_string({"limit": limit, "cursor": cursor})
    return call(config, "get", f"/specs/{spec_id}/generations/{element_type}{query}")


def get_spec_task_status(config: Config, spec_id: str, task_id: str):
    validate_id(spec_id, "specId")
    validate_id(task_id, "taskId")
    return call(config, "get", f"/specs/{spec_id}/tasks/{task_id}")


def sync_spec_with_collection(config: Config, spec_id: str, collection_uid: str):
    """PUT /specs/{specId}/synchronizations?collectionUid=...; answers 202 with a task id."""
    validate_id(spec_id, "specId")
    validate_uid(collection_uid, "collectionUid")

    query = build_query_string({"collectionUid": collection_uid})
    return call(config, "put", f"/specs/{spec_id}/synchronizations{query}")
