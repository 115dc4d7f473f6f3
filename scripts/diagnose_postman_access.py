#!/usr/bin/env python3
"""CI-safe diagnostic for Postman API access.

Prints workspace status and collection list for a given POSTMAN_API_KEY and
POSTMAN_WORKSPACE_ID. Attempts to resolve POSTMAN_COLLECTION_UID when provided.

Does NOT print POSTMAN_API_KEY. Exits non-zero if any API call fails.
"""
import os
import sys

from dotenv import load_dotenv

from postman_sdk import ApiError, InvalidArgument, TransportError, collections, load_config, workspaces
from postman_sdk.utils import is_id, is_uid
from script_utils import truncated


def _entry_uid(entry: dict):
    return entry.get("uid") or entry.get("id")


def resolve_collection_uid(config, workspace_id: str, provided: str | None):
    """Map a collection UID or bare ID onto a UID that exists in the workspace.

    Returns `(uid, reason)`; `uid` is None when nothing matched.
    """
    if not provided:
        return None, None
    provided = provided.strip().lower()

    if is_uid(provided):
        suffix = provided.split("-", 1)[1]
    elif is_id(provided):
        suffix = provided
    else:
        return None, "invalid_format"

    data = collections.get_collections(config, workspace_id).json() or {}
    for entry in data.get("collections") or []:
        uid = (_entry_uid(entry) or "").lower()
        if uid and uid == provided:
            return uid, "resolved_exact"
        if uid and uid.endswith(suffix):
            return uid, "resolved_suffix"
    return None, "not_found"


def main() -> int:
    load_dotenv()
    workspace_id = os.getenv("POSTMAN_WORKSPACE_ID")
    if not os.getenv("POSTMAN_API_KEY") or not workspace_id:
        print("FATAL: POSTMAN_API_KEY and POSTMAN_WORKSPACE_ID must be set for diagnostics.")
        return 2
    config = load_config()

    # Check workspace
    try:
        resp = workspaces.get_workspace(config, workspace_id)
    except (TransportError, InvalidArgument) as e:
        print(f"FATAL: workspace request failed: {e}")
        return 3
    except ApiError as e:
        print(f"FATAL: workspace request returned {e.status_code}")
        print(truncated(e.response.text if e.response is not None else str(e)))
        return 4
    ws = (resp.json() or {}).get("workspace") or {}
    print(f"Workspace status: {resp.status_code}")
    print(f"Workspace name: {ws.get('name')}")

    # List collections
    try:
        cols = (collections.get_collections(config, workspace_id).json() or {}).get("collections") or []
    except (ApiError, TransportError) as e:
        print(f"FATAL: get_collections call failed: {truncated(str(e))}")
        return 6
    print(f"Collection count: {len(cols)}")
    for entry in cols:
        print(f"- {_entry_uid(entry)}: {entry.get('name')}")

    provided = os.getenv("POSTMAN_COLLECTION_UID", "").strip()
    if provided:
        print("Checking provided POSTMAN_COLLECTION_UID...")
        try:
            resolved, reason = resolve_collection_uid(config, workspace_id, provided)
        except (ApiError, TransportError) as e:
            print(f"Resolution error: {truncated(str(e))}")
            return 7
        if resolved:
            print(f"UID FOUND: resolved to {resolved} (reason={reason})")
        else:
            print(f"UID NOT FOUND: the provided POSTMAN_COLLECTION_UID could not be resolved ({reason})")
            return 8

    print("Diagnostics completed successfully.")
    return 0


if __name__ == '__main__':
    sys.exit(main())
