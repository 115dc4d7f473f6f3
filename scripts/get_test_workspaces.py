#!/usr/bin/env python3
"""
List workspaces whose names match a `*` wildcard pattern.

Usage:
  python scripts/get_test_workspaces.py              # every workspace
  python scripts/get_test_workspaces.py "*Updated*"
  python scripts/get_test_workspaces.py "Test*"

Matching is case-insensitive and covers the whole name. Requires `POSTMAN_API_KEY`.
"""
import argparse
import sys

from dotenv import load_dotenv

from postman_sdk import ApiError, TransportError, load_config, workspaces
from script_utils import pattern_to_regex


def find_workspaces(config, pattern: str | None = None):
    """Return `(matched, total)` for the workspaces visible to the API key."""
    data = workspaces.get_workspaces(config).json() or {}
    all_workspaces = data.get("workspaces") or []
    regex = pattern_to_regex(pattern)
    if regex is None:
        return all_workspaces, len(all_workspaces)
    matched = [ws for ws in all_workspaces if regex.fullmatch(ws.get("name") or "")]
    return matched, len(all_workspaces)


def print_workspace(index: int, ws: dict):
    print(f"{index}. {ws.get('name')}")
    print(f"   ID: {ws.get('id')}")
    print(f"   Type: {ws.get('type')}")
    print(f"   Visibility: {ws.get('visibility')}")
    if ws.get("description"):
        print(f"   Description: {ws['description']}")


def main(argv=None) -> int:
    load_dotenv()
    parser = argparse.ArgumentParser(description="List workspaces matching a name pattern")
    parser.add_argument("pattern", nargs="?", help='wildcard pattern, e.g. "*SDK*"')
    args = parser.parse_args(argv)

    print(f"🔹 Finding workspaces matching: {args.pattern}" if args.pattern else "🔹 Listing all workspaces")
    try:
        config = load_config()
        matched, total = find_workspaces(config, args.pattern)
    except (ApiError, TransportError, RuntimeError) as e:
        print("Error fetching workspaces:", e)
        return 1

    if not matched:
        print("No matching workspaces found.")
        return 0

    print(f"Found {len(matched)} workspace(s):")
    for index, ws in enumerate(matched, start=1):
        print_workspace(index, ws)

    print(f"Total: {len(matched)} workspace(s)")
    if args.pattern and total > len(matched):
        print(f"(Filtered from {total} total workspaces)")
    return 0


if __name__ == "__main__":
    sys.exit(main())
