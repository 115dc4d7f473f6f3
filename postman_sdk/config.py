import os
from dataclasses import dataclass, replace

import requests
from dotenv import load_dotenv

POSTMAN_API_KEY_ENV_VAR = "POSTMAN_API_KEY"
POSTMAN_API_BASE_URL_ENV_VAR = "POSTMAN_API_BASE_URL"
BASE_URL = "https://api.getpostman.com"
API_KEY_HEADER = "X-API-Key"


@dataclass(frozen=True)
class Config:
    """Connection settings shared by every API call.

    Built once at startup and passed to each operation; nothing in the
    package reads the environment after that.
    """

    api_key: str
    base_url: str = BASE_URL
    api_key_header: str = API_KEY_HEADER
    session: requests.Session | None = None

    def with_session(self, session: requests.Session) -> "Config":
        return replace(self, session=session)


def load_config(env: dict | None = None) -> Config:
    """Build a Config from the process environment (or the given mapping).

    A `.env` file in the working directory is honoured when reading the
    process environment.
    """
    if env is None:
        load_dotenv()
        env = os.environ

    api_key = env.get(POSTMAN_API_KEY_ENV_VAR)
    if not api_key:
        raise RuntimeError(f"Missing env var: {POSTMAN_API_KEY_ENV_VAR}")

    base_url = env.get(POSTMAN_API_BASE_URL_ENV_VAR) or BASE_URL
    return Config(api_key=api_key, base_url=base_url)
