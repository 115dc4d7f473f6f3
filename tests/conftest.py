import pytest

from postman_sdk import Config

from .constants import API_KEY


@pytest.fixture
def config():
    return Config(api_key=API_KEY)
