import json
import os
import re
import sys
import traceback
from datetime import datetime, timezone
from pathlib import Path

ROOT = Path(__file__).resolve().parents[1]
OUT = ROOT / "generated"


def env(name: str) -> str:
    value = os.getenv(name)
    if not value:
        raise RuntimeError(f"Missing env var: {name}")
    return value


def write_log(log_file: Path, action: str, status: str, details=None):
    """Append one JSON line describing an action to `log_file`."""
    entry = {
        "ts": datetime.now(timezone.utc).isoformat(),
        "action": action,
        "status": status,
        "details": details,
    }
    try:
        log_file.parent.mkdir(parents=True, exist_ok=True)
        with log_file.open("a", encoding="utf-8") as fh:
            fh.write(json.dumps(entry, ensure_ascii=False) + "\n")
    except OSError:
        # Logging must not break the main flow
        sys.stderr.write("Failed to write log entry: " + traceback.format_exc())


def truncated(text, limit=500):
    if not text:
        return ""
    return text if len(text) <= limit else text[:limit] + "...[truncated]"


def ask_confirmation(question: str) -> bool:
    """True only for "y"/"yes"; closed or non-interactive stdin counts as no."""
    try:
        answer = input(question).strip().lower()
    except EOFError:
        return False
    return answer in ("y", "yes")


def pattern_to_regex(pattern: str | None):
    """Compile a `*` wildcard pattern into a case-insensitive full-match regex."""
    if not pattern:
        return None
    return re.compile(".*".join(re.escape(part) for part in pattern.split("*")), re.IGNORECASE)
