from .config import Config
from .core import call


def get_authenticated_user(config: Config):
    """GET /me: id, username, email and team of the API key's owner."""
    return call(config, "get", "/me")
