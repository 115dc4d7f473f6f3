from .config import Config
from .core import call
from .utils import build_query_string, validate_id


def get_mocks(config: Config, *, team_id: str | None = None, workspace_id: str | None = None):
    if workspace_id is not None:
        validate_id(workspace_id, "workspaceId")

    query = build_query_string({"teamId": team_id, "workspace": workspace_id})
    return call(config, "get", f"/mocks{query}")


def create_mock(config: Config, mock_data: dict, workspace_id: str):
    """Create a mock server via POST /mocks?workspace=...

    `mock_data` needs at least `collection` (the collection UID); `environment`,
    `name` and `private` are optional.
    """
    validate_id(workspace_id, "workspaceId")

    query = build_query_string({"workspace": workspace_id})
    return call(config, "post", f"/mocks{query}", {"mock": mock_data})


def get_mock(config: Config, mock_id: str):
    validate_id(mock_id, "mockId")
    return call(config, "get", f"/mocks/{mock_id}")


def update_mock(config: Config, mock_id: str, mock_data: dict):
    validate_id(mock_id, "mockId")
    return call(config, "put", f"/mocks/{mock_id}", {"mock": mock_data})


def delete_mock(config: Config, mock_id: str):
    validate_id(mock_id, "mockId")
    return call(config, "delete", f"/mocks/{mock_id}")


def get_mock_call_logs(config: Config, mock_id: str, *, limit: int | None = None, cursor: str | None = None,
                       until: str | None = None, since: str | None = None,
                       response_status_code: int | None = None, response_type: str | None = None,
                       request_method: str | None = None, request_path: str | None = None,
                       sort: str | None = None, direction: str | None = None, include: str | None = None):
    """GET /mocks/{mockId}/call-logs.

    `until` and `since` are ISO 8601 timestamps. `include` is a comma-separated
    subset of request.headers, request.body, response.headers, response.body.
    """
    validate_id(mock_id, "mockId")

    query = build_query_string({
        "limit": limit,
        "cursor": cursor,
        "until": until,
        "since": since,
        "responseStatusCode": response_status_code,
        "responseType": response_type,
        "requestMethod": request_method,
        "requestPath": request_path,
        "sort": sort,
        "direction": direction,
        "include": include,
    })
    return call(config, "get", f"/mocks/{mock_id}/call-logs{query}")


def publish_mock(config: Config, mock_id: str):
    """Make a mock server public: POST /mocks/{mockId}/publish."""
    validate_id(mock_id, "mockId")
    return call(config, "post", f"/mocks/{mock_id}/publish")


def unpublish_mock(config: Config, mock_id: str):
    validate_id(mock_id, "mockId")
    return call(config, "delete", f"/mocks/{mock_id}/unpublish")


def get_mock_server_responses(config: Config, mock_id: str):
    validate_id(mock_id, "mockId")
    return call(config, "get", f"/mocks/{mock_id}/server-responses")


def create_mock_server_response(config: Config, mock_id: str, server_response_data: dict):
    """POST /mocks/{mockId}/server-responses.

    A server response (e.g. a 5xx) is returned for every call while active,
    regardless of the mock's examples.
    """
    validate_id(mock_id, "mockId")
    return call(
        config,
        "post",
        f"/mocks/{mock_id}/server-responses",
        {"serverResponse": server_response_data},
    )


def get_mock_server_response(config: Config, mock_id: str, server_response_id: str):
    validate_id(mock_id, "mockId")
    validate_id(server_response_id, "serverResponseId")
    return call(config, "get", f"/mocks/{mock_id}/server-responses/{server_response_id}")


def update_mock_server_response(config: Config, mock_id: str, server_response_id: str,
                                server_response_data: dict):
    validate_id(mock_id, "mockId")
    validate_id(server_response_id, "serverResponseId")
    return call(
        config,
        "put",
        f"/mocks/{mock_id}/server-responses/{server_response_id}",
        {"serverResponse": server_response_data},
    )


def delete_mock_server_response(config: Config, mock_id: str, server_response_id: str):
    validate_id(mock_id, "mockId")
    validate_id(server_response_id, "serverResponseId")
    return call(config, "delete", f"/mocks/{mock_id}/server-responses/{server_response_id}")
