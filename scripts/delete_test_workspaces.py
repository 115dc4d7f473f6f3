#!/usr/bin/env python3
"""
Delete workspaces by name pattern or by id.

Usage:
  python scripts/delete_test_workspaces.py "*Updated*"
  python scripts/delete_test_workspaces.py "Test*" --force
  python scripts/delete_test_workspaces.py --workspace-id <id> --force

The pattern uses `*` as a wildcard and is matched case-insensitively against
the whole name. Without --force the matched workspaces are listed and a
confirmation is asked for. Each deletion is appended to
generated/postman_delete.log.

WARNING: this permanently deletes workspaces.
"""
import argparse
import sys

from dotenv import load_dotenv

from get_test_workspaces import find_workspaces, print_workspace
from postman_sdk import ApiError, InvalidArgument, TransportError, load_config, workspaces
from script_utils import OUT, ask_confirmation, write_log

LOG_PATH = OUT / "postman_delete.log"


def delete_workspaces(config, targets) -> list:
    """Delete each workspace; returns the error messages collected."""
    errors = []
    for ws in targets:
        print(f"Deleting: {ws.get('name')} ({ws.get('id')})")
        try:
            workspaces.delete_workspace(config, ws.get("id"))
            print(f"✅ Deleted: {ws.get('name')}")
            write_log(LOG_PATH, "delete_workspace", "deleted", {"id": ws.get("id"), "name": ws.get("name")})
        except (ApiError, InvalidArgument, TransportError) as e:
            print(f"Failed to delete {ws.get('name')}:", e)
            write_log(LOG_PATH, "delete_workspace", "error", {"id": ws.get("id"), "message": str(e)})
            errors.append(str(e))
    return errors


def main(argv=None) -> int:
    load_dotenv()
    parser = argparse.ArgumentParser(description="Delete workspaces by name pattern or id")
    parser.add_argument("pattern", nargs="?", help='wildcard pattern, e.g. "Test*"')
    parser.add_argument("--workspace-id", "--workspaceId", dest="workspace_id")
    parser.add_argument("--force", action="store_true", help="skip the confirmation prompt")
    args = parser.parse_args(argv)

    workspace_id = (args.workspace_id or "").strip()
    if args.workspace_id is not None and not workspace_id:
        print("Error: --workspace-id value cannot be empty")
        return 1
    if not workspace_id and not args.pattern:
        parser.print_usage()
        print("Error: a pattern or --workspace-id is required")
        return 1

    try:
        config = load_config()
        if workspace_id:
            resp = workspaces.get_workspace(config, workspace_id)
            targets = [(resp.json() or {}).get("workspace") or {"id": workspace_id}]
        else:
            targets, _ = find_workspaces(config, args.pattern)
    except (ApiError, InvalidArgument, TransportError, RuntimeError) as e:
        print("Error fetching workspaces:", e)
        return 1

    if not targets:
        print("No matching workspaces found.")
        return 0

    print(f"Found {len(targets)} workspace(s) to delete:")
    for index, ws in enumerate(targets, start=1):
        print_workspace(index, ws)

    if args.force:
        print("--force given, skipping confirmation")
    else:
        print("⚠️ WARNING: this will permanently delete these workspaces")
        if not ask_confirmation('Type "yes" or "y" to confirm deletion: '):
            print("Deletion cancelled.")
            return 1

    errors = delete_workspaces(config, targets)

    print(f"Successfully deleted: {len(targets) - len(errors)}")
    print(f"Failed: {len(errors)}")
    return 1 if errors else 0


if __name__ == "__main__":
    sys.exit(main())
