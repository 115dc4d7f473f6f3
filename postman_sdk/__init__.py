"""Python client for the Postman API.

Each resource module exposes one function per REST operation. Every function
takes a Config first and returns the `requests.Response` of a 2xx call::

    from postman_sdk import load_config, workspaces

    config = load_config()
    print(workspaces.get_workspaces(config).json()["workspaces"])
"""

from . import (
    collection_requests,
    collection_responses,
    collections,
    environments,
    groups,
    mocks,
    monitors,
    pull_requests,
    specs,
    tags,
    users,
    workspaces,
)
from .config import Config, load_config
from .core import build_request, execute
from .errors import ApiError, InvalidArgument, TransportError
from .utils import build_query_string, build_uid, get_content_fs, validate_id, validate_uid

__version__ = "0.8.1"

__all__ = [
    "ApiError",
    "Config",
    "InvalidArgument",
    "TransportError",
    "build_query_string",
    "build_request",
    "build_uid",
    "collection_requests",
    "collection_responses",
    "collections",
    "environments",
    "execute",
    "get_content_fs",
    "groups",
    "load_config",
    "mocks",
    "monitors",
    "pull_requests",
    "specs",
    "tags",
    "users",
    "validate_id",
    "validate_uid",
    "workspaces",
]
