from .config import Config
from .core import call
from .utils import require


def get_groups(config: Config):
    return call(config, "get", "/groups")


def get_group(config: Config, group_id):
    # Group ids are numeric, not UUIDs.
    require(group_id, "groupId")
    return call(config, "get", f"/groups/{group_id}")
