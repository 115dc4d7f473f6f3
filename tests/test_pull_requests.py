import pytest

from postman_sdk import InvalidArgument, pull_requests

from .constants import BASE_URL, DEFAULT_ID, DEFAULT_UID, OTHER_UID


class TestPullRequests:

    def test_get_pull_request(self, config, requests_mock):
        requests_mock.get(f"{BASE_URL}/pull-requests/{DEFAULT_ID}", json={"id": DEFAULT_ID})

        assert pull_requests.get_pull_request(config, DEFAULT_ID).json() == {"id": DEFAULT_ID}

    def test_update_pull_request(self, config, requests_mock):
        requests_mock.put(f"{BASE_URL}/pull-requests/{DEFAULT_ID}", json={})

        pull_requests.update_pull_request(config, DEFAULT_ID, "Add refunds", ["12345678"])
        assert requests_mock.last_request.json() == {"title": "Add refunds", "reviewers": ["12345678"]}

        pull_requests.update_pull_request(config, DEFAULT_ID, "Add refunds", [], description="Ready")
        assert requests_mock.last_request.json()["description"] == "Ready"

    def test_review_pull_request(self, config, requests_mock):
        requests_mock.post(f"{BASE_URL}/pull-requests/{DEFAULT_ID}/tasks", json={})

        pull_requests.review_pull_request(config, DEFAULT_ID, "decline", comment="Missing tests")

        assert requests_mock.last_request.json() == {"action": "decline", "comment": "Missing tests"}

    def test_review_requires_action(self, config, requests_mock):
        with pytest.raises(InvalidArgument, match="action is required"):
            pull_requests.review_pull_request(config, DEFAULT_ID, "")
        assert not requests_mock.called

    def test_collection_pull_requests(self, config, requests_mock):
        url = f"{BASE_URL}/collections/{DEFAULT_UID}/pull-requests"
        requests_mock.get(url, json={"data": []})
        requests_mock.post(url, json={})

        pull_requests.get_collection_pull_requests(config, DEFAULT_UID)
        pull_requests.create_collection_pull_request(config, DEFAULT_UID, "Merge fork", OTHER_UID, ["1"])

        assert requests_mock.last_request.json() == {
            "title": "Merge fork",
            "destinationId": OTHER_UID,
            "reviewers": ["1"],
        }

    def test_destination_must_be_uid(self, config):
        with pytest.raises(InvalidArgument, match="destinationId must be a valid UID format"):
            pull_requests.create_collection_pull_request(config, DEFAULT_UID, "Merge fork", DEFAULT_ID, [])
