from urllib.parse import quote

from .config import Config
from .core import call
from .utils import build_query_string, require


def get_tag_entities(config: Config, slug: str, *, limit: int | None = None, direction: str | None = None,
                     cursor: str | None = None, entity_type: str | None = None):
    """GET /tags/{slug}/entities: elements (api, collection, workspace) carrying a tag.

    `limit` caps at 50; follow `meta.nextCursor` with `cursor` for more.
    """
    require(slug, "slug")

    query = build_query_string({
        "limit": limit,
        "direction": direction,
        "cursor": cursor,
        "entityType": entity_type,
    })
    return call(config, "get", f"/tags/{quote(slug, safe='')}/entities{query}")
