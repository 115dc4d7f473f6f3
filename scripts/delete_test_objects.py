#!/usr/bin/env python3
"""
Delete every collection, spec and/or environment in a workspace.

Usage:
  python scripts/delete_test_objects.py -c              # delete all collections
  python scripts/delete_test_objects.py -c -s -e        # collections, specs and environments
  python scripts/delete_test_objects.py -c -s --dry-run # list what would be deleted
  python scripts/delete_test_objects.py -c --force      # skip the confirmation prompt

The workspace comes from --workspace or `POSTMAN_WORKSPACE_ID`; `POSTMAN_API_KEY`
must be set. Each deletion is appended to generated/postman_delete.log.

WARNING: this permanently deletes ALL objects of the selected types.
"""
import argparse
import sys

from dotenv import load_dotenv

from postman_sdk import ApiError, InvalidArgument, TransportError, collections, environments, load_config, specs
from script_utils import OUT, ask_confirmation, env, write_log

LOG_PATH = OUT / "postman_delete.log"


def list_collections(config, workspace_id):
    data = collections.get_collections(config, workspace_id).json() or {}
    return [(c.get("id"), c.get("name")) for c in data.get("collections") or []]


def list_specs(config, workspace_id):
    data = specs.get_specs(config, workspace_id).json() or {}
    return [(s.get("id"), s.get("name")) for s in data.get("specs") or []]


def list_environments(config, workspace_id):
    data = environments.get_environments(config, workspace_id).json() or {}
    return [(e.get("id"), e.get("name")) for e in data.get("environments") or []]


RESOURCES = {
    "collection": (list_collections, collections.delete_collection),
    "spec": (list_specs, specs.delete_spec),
    "environment": (list_environments, environments.delete_environment),
}


def delete_all(config, workspace_id: str, kinds, dry_run: bool = False) -> list:
    """Delete every object of each kind; returns the error messages collected."""
    errors = []
    for kind in kinds:
        lister, deleter = RESOURCES[kind]
        objects = lister(config, workspace_id)
        print(f"Found {len(objects)} {kind}(s)")

        for object_id, name in objects:
            if dry_run:
                print(f"- would delete {kind} {name}: {object_id}")
                continue

            print(f"Deleting {kind} {name}: {object_id}")
            try:
                deleter(config, object_id)
                print(f"✅ Deleted {kind}: {name}")
                write_log(LOG_PATH, f"delete_{kind}", "deleted", {"id": object_id, "name": name})
            except (ApiError, TransportError) as e:
                if isinstance(e, ApiError) and e.status_code == 404:
                    print("Already deleted")
                    write_log(LOG_PATH, f"delete_{kind}", "already_deleted", {"id": object_id})
                    continue
                print(f"Failed to delete {kind} {name}:", e)
                write_log(LOG_PATH, f"delete_{kind}", "error", {"id": object_id, "message": str(e)})
                errors.append(str(e))
    return errors


def main(argv=None) -> int:
    load_dotenv()
    parser = argparse.ArgumentParser(description="Delete all objects of the given types in a workspace")
    parser.add_argument("-c", "--collections", action="store_true")
    parser.add_argument("-s", "--specs", action="store_true")
    parser.add_argument("-e", "--environments", action="store_true")
    parser.add_argument("-w", "--workspace", dest="workspace_id")
    parser.add_argument("--force", action="store_true", help="skip the confirmation prompt")
    parser.add_argument("--dry-run", action="store_true")
    args = parser.parse_args(argv)

    kinds = [
        kind for kind, selected in (
            ("collection", args.collections),
            ("spec", args.specs),
            ("environment", args.environments),
        ) if selected
    ]
    if not kinds:
        parser.print_usage()
        print("Select at least one of -c, -s, -e")
        return 1

    try:
        config = load_config()
        workspace_id = args.workspace_id or env("POSTMAN_WORKSPACE_ID")
    except RuntimeError as e:
        print("Error:", e)
        return 1

    if not args.dry_run and not args.force:
        names = ", ".join(f"{k}s" for k in kinds)
        if not ask_confirmation(f"Delete ALL {names} in workspace {workspace_id}? (yes/no): "):
            print("Aborted")
            return 1

    try:
        errors = delete_all(config, workspace_id, kinds, dry_run=args.dry_run)
    except (ApiError, InvalidArgument, TransportError) as e:
        print("Error:", e)
        return 1

    if errors:
        print("Completed with errors:")
        for e in errors:
            print("-", e)
        return 1

    print("Dry run complete" if args.dry_run else f"Wrote deletion log to {LOG_PATH}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
