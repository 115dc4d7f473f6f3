import json

import requests

from .config import Config
from .errors import ApiError, InvalidArgument

RESERVED_KEYS = ("method", "url", "data")

# Distinguishes "no body" from an explicit None body.
UNSET = object()


def fixed_headers(config: Config) -> dict:
    return {
        "Content-Type": "application/json",
        config.api_key_header: config.api_key,
    }


def merge_extra(descriptor: dict, extra: dict | None) -> dict:
    """Copy transport options from `extra` onto `descriptor`.

    Headers in `extra` are added to the fixed ones; a header that names one of
    the fixed keys (in any case) is ignored. `method`, `url` and `data` cannot
    be set this way.
    """
    if not extra:
        return descriptor

    for key, value in extra.items():
        if key in RESERVED_KEYS:
            raise InvalidArgument(f"extra options cannot override '{key}'")
        if key == "headers":
            headers = descriptor["headers"]
            taken = {name.lower() for name in headers}
            for name, header_value in (value or {}).items():
                if name.lower() not in taken:
                    headers[name] = header_value
            continue
        descriptor[key] = value

    return descriptor


def build_request(config: Config, method: str, endpoint: str, data=UNSET, extra: dict | None = None) -> dict:
    """Build the request descriptor for one API call.

    `endpoint` is appended to the base URL as given: it must start with "/"
    and carry any query string and path encoding already.
    """
    descriptor = {
        "method": method,
        "url": f"{config.base_url}{endpoint}",
        "headers": fixed_headers(config),
    }
    if data is not UNSET:
        descriptor["data"] = data
    return merge_extra(descriptor, extra)


def _response_body(response: requests.Response):
    try:
        return response.json()
    except ValueError:
        return response.text


def execute(descriptor: dict, session: requests.Session | None = None) -> requests.Response:
    """Send a descriptor and return the response, raising ApiError on non-2xx.

    Connection errors from requests propagate unchanged. Redirects that reach
    this point (e.g. with allow_redirects=False) are failures too.
    """
    kwargs = dict(descriptor)
    method = kwargs.pop("method")
    url = kwargs.pop("url")
    if "data" in kwargs:
        kwargs["json"] = kwargs.pop("data")

    transport = session if session is not None else requests
    response = transport.request(method, url, **kwargs)

    if response.status_code < 200 or response.status_code > 299:
        body = _response_body(response)
        raise ApiError(
            f"API call failed with status {response.status_code}: "
            f"{json.dumps(body, separators=(',', ':'), ensure_ascii=False)}",
            status_code=response.status_code,
            data=body,
            response=response,
        )

    return response


def call(config: Config, method: str, endpoint: str, data=UNSET, extra: dict | None = None) -> requests.Response:
    """Build and execute in one step; what every resource function ends with."""
    return execute(build_request(config, method, endpoint, data, extra), config.session)
