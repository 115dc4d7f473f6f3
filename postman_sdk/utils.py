import re
from pathlib import Path
from urllib.parse import urlencode

from .errors import InvalidArgument

ID_PATTERN = re.compile(
    r"^[0-9a-fA-F]{8}-[0-9a-fA-F]{4}-[0-9a-fA-F]{4}-[0-9a-fA-F]{4}-[0-9a-fA-F]{12}$"
)
UID_PATTERN = re.compile(
    r"^[0-9]{1,10}-[0-9a-fA-F]{8}-[0-9a-fA-F]{4}-[0-9a-fA-F]{4}-[0-9a-fA-F]{4}-[0-9a-fA-F]{12}$"
)

EXAMPLE_ID = "bf5cb6e7-0a1e-4b82-a577-b2068a70f830"
EXAMPLE_UID = f"12345678-{EXAMPLE_ID}"


def _matches(pattern: re.Pattern, value) -> bool:
    # fullmatch rather than match: "$" alone would accept a trailing newline
    return isinstance(value, str) and pattern.fullmatch(value) is not None


def is_id(value) -> bool:
    return _matches(ID_PATTERN, value)


def is_uid(value) -> bool:
    return _matches(UID_PATTERN, value)


def require(value, field_name: str) -> None:
    """Raise InvalidArgument when a non-ID argument is missing or empty."""
    if value is None or value == "":
        raise InvalidArgument(f"{field_name} is required")


def validate_id(value, field_name: str) -> None:
    """Raise InvalidArgument unless `value` is a UUID-formatted ID."""
    if value is None or value == "":
        raise InvalidArgument(f"{field_name} is required")
    if not is_id(value):
        raise InvalidArgument(
            f"{field_name} must be a valid ID format (e.g., '{EXAMPLE_ID}')"
        )


def validate_uid(value, field_name: str) -> None:
    """Raise InvalidArgument unless `value` is an `<ownerId>-<ID>` UID."""
    if value is None or value == "":
        raise InvalidArgument(f"{field_name} is required")
    if not is_uid(value):
        raise InvalidArgument(
            f"{field_name} must be a valid UID format (e.g., '{EXAMPLE_UID}')"
        )


def build_uid(owner_id, object_id: str) -> str:
    """Return `<owner_id>-<object_id>`.

    A value that is already a UID is returned as-is and `owner_id` is ignored.
    """
    if is_uid(object_id):
        return object_id
    validate_id(object_id, "objectId")
    return f"{owner_id}-{object_id}"


def _stringify(value) -> str:
    # The API expects JSON-style booleans in query strings.
    if isinstance(value, bool):
        return "true" if value else "false"
    return str(value)


def build_query_string(params: dict) -> str:
    """Encode `params` as `?k=v&...`, skipping None values.

    Keys keep the mapping's insertion order. Returns "" when nothing is left.
    """
    pairs = [(key, _stringify(value)) for key, value in params.items() if value is not None]
    if not pairs:
        return ""
    return "?" + urlencode(pairs)


def get_content_fs(file_path) -> dict:
    """Read a local file into the `{"content": ...}` shape used by spec file endpoints."""
    return {"content": Path(file_path).resolve().read_text(encoding="utf-8")}
