from .config import Config
from .core import call
from .utils import require, validate_id, validate_uid

REVIEW_ACTIONS = ("approve", "decline", "merge", "unapprove")


def get_pull_request(config: Config, pull_request_id: str):
    validate_id(pull_request_id, "pullRequestId")
    return call(config, "get", f"/pull-requests/{pull_request_id}")


def update_pull_request(config: Config, pull_request_id: str, title: str, reviewers: list,
                        description: str | None = None):
    """PUT /pull-requests/{pullRequestId}. `reviewers` replaces the whole reviewer list."""
    validate_id(pull_request_id, "pullRequestId")

    body = {"title": title, "reviewers": reviewers}
    if description is not None:
        body["description"] = description
    return call(config, "put", f"/pull-requests/{pull_request_id}", body)


def review_pull_request(config: Config, pull_request_id: str, action: str, comment: str | None = None):
    """POST /pull-requests/{pullRequestId}/tasks with one of REVIEW_ACTIONS.

    `comment` is only meaningful for `decline`.
    """
    validate_id(pull_request_id, "pullRequestId")
    require(action, "action")

    body = {"action": action}
    if comment is not None:
        body["comment"] = comment
    return call(config, "post", f"/pull-requests/{pull_request_id}/tasks", body)


def get_collection_pull_requests(config: Config, collection_uid: str):
    validate_uid(collection_uid, "collectionUid")
    return call(config, "get", f"/collections/{collection_uid}/pull-requests")


def create_collection_pull_request(config: Config, collection_uid: str, title: str, destination_uid: str,
                                   reviewers: list, description: str | None = None):
    """Open a pull request from a forked collection into `destination_uid`."""
    validate_uid(collection_uid, "collectionUid")
    validate_uid(destination_uid, "destinationId")
    require(title, "title")

    body = {"title": title, "destinationId": destination_uid, "reviewers": reviewers}
    if description is not None:
        body["description"] = description
    return call(config, "post", f"/collections/{collection_uid}/pull-requests", body)
