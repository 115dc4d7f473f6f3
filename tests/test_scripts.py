import importlib
import json
from pathlib import Path

import pytest
import requests

from .constants import API_KEY, BASE_URL, DEFAULT_ID, DEFAULT_UID, OTHER_ID

SCRIPTS_DIR = Path(__file__).resolve().parents[1] / "scripts"


@pytest.fixture
def scripts(monkeypatch):
    monkeypatch.syspath_prepend(str(SCRIPTS_DIR))
    monkeypatch.setenv("POSTMAN_API_KEY", API_KEY)
    monkeypatch.delenv("POSTMAN_API_BASE_URL", raising=False)

    def load(name):
        return importlib.import_module(name)
    return load


def read_log(path):
    return [json.loads(line) for line in path.read_text(encoding="utf-8").splitlines()]


class TestSyncSpec:

    @pytest.fixture
    def sync_spec(self, scripts, monkeypatch, tmp_path):
        module = scripts("sync_spec")
        monkeypatch.setattr(module, "LOG_FILE", tmp_path / "actions.log")
        return module

    @pytest.fixture
    def source(self, tmp_path):
        path = tmp_path / "openapi.yaml"
        path.write_text("openapi: 3.1.0\ninfo:\n  title: Payments\n", encoding="utf-8")
        return path

    def test_sync_with_flags(self, sync_spec, source, requests_mock, capsys):
        requests_mock.get(f"{BASE_URL}/specs/{DEFAULT_ID}", json={"name": "Payments"})
        requests_mock.patch(f"{BASE_URL}/specs/{DEFAULT_ID}/files/openapi.yaml", json={"id": "file"})

        code = sync_spec.main(["--file", str(source), "--spec-id", DEFAULT_ID, "--spec-file-path", "openapi.yaml"])

        assert code == 0
        assert requests_mock.last_request.json() == {"content": source.read_text(encoding="utf-8")}
        assert requests_mock.last_request.headers["X-API-Key"] == API_KEY
        assert "✅ Synced" in capsys.readouterr().out

    def test_sync_with_positional_arguments(self, sync_spec, source, requests_mock):
        requests_mock.get(f"{BASE_URL}/specs/{DEFAULT_ID}", json={})
        requests_mock.patch(f"{BASE_URL}/specs/{DEFAULT_ID}/files/openapi.yaml", json={})

        assert sync_spec.main([str(source), DEFAULT_ID, "openapi.yaml"]) == 0

    def test_spec_id_from_config_file(self, sync_spec, source, requests_mock, tmp_path):
        config_file = tmp_path / "specs.json"
        config_file.write_text(json.dumps({"specs": [
            {"rootFilePath": "other.yaml", "specId": OTHER_ID},
            {"rootFilePath": "openapi.yaml", "specId": DEFAULT_ID},
        ]}), encoding="utf-8")
        requests_mock.get(f"{BASE_URL}/specs/{DEFAULT_ID}", json={})
        requests_mock.patch(f"{BASE_URL}/specs/{DEFAULT_ID}/files/openapi.yaml", json={})

        code = sync_spec.main(["--file", str(source), "--spec-file-path", "openapi.yaml", "--config", str(config_file)])

        assert code == 0
        assert requests_mock.call_count == 2

    def test_create_in_workspace(self, sync_spec, source, requests_mock, tmp_path):
        requests_mock.post(f"{BASE_URL}/specs", status_code=201, json={"id": OTHER_ID})
        requests_mock.get(f"{BASE_URL}/specs/{OTHER_ID}", json={})
        requests_mock.patch(f"{BASE_URL}/specs/{OTHER_ID}/files/openapi.yaml", json={})

        code = sync_spec.main([
            "--file", str(source), "--spec-file-path", "openapi.yaml", "--create-in-workspace", DEFAULT_ID,
        ])

        assert code == 0
        created = requests_mock.request_history[0].json()
        assert created["type"] == "OPENAPI:3.1"
        assert created["name"] == "openapi"
        assert created["files"][0]["path"] == "openapi.yaml"
        assert [e["action"] for e in read_log(tmp_path / "actions.log")] == ["create_spec", "sync_spec_file"]

    def test_missing_spec(self, sync_spec, source, requests_mock, tmp_path, capsys):
        requests_mock.get(f"{BASE_URL}/specs/{DEFAULT_ID}", status_code=404, json={"error": "notFound"})

        code = sync_spec.main(["--file", str(source), "--spec-id", DEFAULT_ID, "--spec-file-path", "openapi.yaml"])

        assert code == 1
        assert "API call failed with status 404" in capsys.readouterr().out
        entry = read_log(tmp_path / "actions.log")[-1]
        assert entry["status"] == "failed"
        assert requests_mock.call_count == 1

    def test_missing_source_file(self, sync_spec, requests_mock, tmp_path):
        requests_mock.get(f"{BASE_URL}/specs/{DEFAULT_ID}", json={})

        code = sync_spec.main([
            "--file", str(tmp_path / "nope.yaml"), "--spec-id", DEFAULT_ID, "--spec-file-path", "openapi.yaml",
        ])

        assert code == 1

    def test_no_spec_id(self, sync_spec, source, requests_mock):
        assert sync_spec.main(["--file", str(source), "--spec-file-path", "openapi.yaml"]) == 1
        assert not requests_mock.called

    def test_usage(self, sync_spec):
        assert sync_spec.main([]) == 1

    def test_malformed_config_file(self, sync_spec, source, requests_mock, tmp_path, capsys):
        config_file = tmp_path / "specs.json"
        config_file.write_text("{not json", encoding="utf-8")

        code = sync_spec.main(["--file", str(source), "--spec-file-path", "openapi.yaml", "--config", str(config_file)])

        assert code == 1
        assert "Error:" in capsys.readouterr().out
        assert not requests_mock.called


class TestDeleteTestObjects:

    @pytest.fixture
    def delete_objects(self, scripts, monkeypatch, tmp_path):
        module = scripts("delete_test_objects")
        monkeypatch.setattr(module, "LOG_PATH", tmp_path / "delete.log")
        monkeypatch.setenv("POSTMAN_WORKSPACE_ID", DEFAULT_ID)
        return module

    def test_deletes_collections(self, delete_objects, requests_mock, tmp_path):
        requests_mock.get(f"{BASE_URL}/collections", json={"collections": [
            {"id": DEFAULT_ID, "uid": DEFAULT_UID, "name": "One"},
            {"id": OTHER_ID, "name": "Two"},
        ]})
        requests_mock.delete(f"{BASE_URL}/collections/{DEFAULT_ID}", json={})
        requests_mock.delete(f"{BASE_URL}/collections/{OTHER_ID}", status_code=404, json={"error": "notFound"})

        code = delete_objects.main(["-c", "--force"])

        assert code == 0
        assert requests_mock.request_history[0].url == f"{BASE_URL}/collections?workspace={DEFAULT_ID}"
        statuses = [e["status"] for e in read_log(tmp_path / "delete.log")]
        assert statuses == ["deleted", "already_deleted"]

    def test_specs_and_environments(self, delete_objects, requests_mock):
        requests_mock.get(f"{BASE_URL}/specs", json={"specs": [{"id": DEFAULT_ID, "name": "Spec"}]})
        requests_mock.get(f"{BASE_URL}/environments", json={"environments": [{"id": OTHER_ID, "name": "Env"}]})
        requests_mock.delete(f"{BASE_URL}/specs/{DEFAULT_ID}", status_code=204)
        requests_mock.delete(f"{BASE_URL}/environments/{OTHER_ID}", json={})

        assert delete_objects.main(["-s", "-e", "--force"]) == 0

        deletes = [r.url for r in requests_mock.request_history if r.method == "DELETE"]
        assert deletes == [f"{BASE_URL}/specs/{DEFAULT_ID}", f"{BASE_URL}/environments/{OTHER_ID}"]

    def test_failures_are_reported(self, delete_objects, requests_mock, capsys):
        requests_mock.get(f"{BASE_URL}/collections", json={"collections": [{"id": DEFAULT_ID, "name": "One"}]})
        requests_mock.delete(f"{BASE_URL}/collections/{DEFAULT_ID}", status_code=500, json={"error": "boom"})

        assert delete_objects.main(["--collections", "--force"]) == 1
        assert "Completed with errors" in capsys.readouterr().out

    def test_dry_run(self, delete_objects, requests_mock):
        requests_mock.get(f"{BASE_URL}/collections", json={"collections": [{"id": DEFAULT_ID, "name": "One"}]})

        assert delete_objects.main(["-c", "--dry-run"]) == 0
        assert all(r.method == "GET" for r in requests_mock.request_history)

    def test_declined_confirmation(self, delete_objects, requests_mock, monkeypatch):
        monkeypatch.setattr("builtins.input", lambda prompt: "no")

        assert delete_objects.main(["-c"]) == 1
        assert not requests_mock.called

    def test_nothing_selected(self, delete_objects, requests_mock):
        assert delete_objects.main([]) == 1
        assert not requests_mock.called

    def test_missing_workspace_env(self, delete_objects, requests_mock, monkeypatch, capsys):
        monkeypatch.delenv("POSTMAN_WORKSPACE_ID")

        assert delete_objects.main(["-c", "--force"]) == 1
        assert "Missing env var: POSTMAN_WORKSPACE_ID" in capsys.readouterr().out
        assert not requests_mock.called

    def test_missing_api_key(self, delete_objects, requests_mock, monkeypatch):
        monkeypatch.delenv("POSTMAN_API_KEY")

        assert delete_objects.main(["-c", "--force"]) == 1
        assert not requests_mock.called

    def test_transport_error_does_not_stop_the_loop(self, delete_objects, requests_mock, tmp_path):
        requests_mock.get(f"{BASE_URL}/collections", json={"collections": [
            {"id": DEFAULT_ID, "name": "One"},
            {"id": OTHER_ID, "name": "Two"},
        ]})
        requests_mock.delete(f"{BASE_URL}/collections/{DEFAULT_ID}", exc=requests.exceptions.ConnectionError)
        requests_mock.delete(f"{BASE_URL}/collections/{OTHER_ID}", json={})

        assert delete_objects.main(["-c", "--force"]) == 1

        statuses = [e["status"] for e in read_log(tmp_path / "delete.log")]
        assert statuses == ["error", "deleted"]

    def test_closed_stdin_counts_as_no(self, delete_objects, requests_mock, monkeypatch):
        def closed(prompt):
            raise EOFError
        monkeypatch.setattr("builtins.input", closed)

        assert delete_objects.main(["-c"]) == 1
        assert not requests_mock.called


class TestDiagnose:

    @pytest.fixture
    def diagnose(self, scripts, monkeypatch):
        monkeypatch.setenv("POSTMAN_WORKSPACE_ID", DEFAULT_ID)
        monkeypatch.delenv("POSTMAN_COLLECTION_UID", raising=False)
        return scripts("diagnose_postman_access")

    @pytest.fixture
    def workspace(self, requests_mock):
        requests_mock.get(f"{BASE_URL}/workspaces/{DEFAULT_ID}", json={"workspace": {"name": "Demo"}})
        requests_mock.get(f"{BASE_URL}/collections", json={"collections": [
            {"id": OTHER_ID, "uid": DEFAULT_UID.replace(DEFAULT_ID, OTHER_ID), "name": "Payments"},
        ]})

    def test_success(self, diagnose, workspace, capsys):
        assert diagnose.main() == 0

        out = capsys.readouterr().out
        assert "Workspace name: Demo" in out
        assert "Collection count: 1" in out
        assert API_KEY not in out

    def test_resolves_bare_id(self, diagnose, workspace, monkeypatch, capsys):
        monkeypatch.setenv("POSTMAN_COLLECTION_UID", OTHER_ID)

        assert diagnose.main() == 0
        assert "reason=resolved_suffix" in capsys.readouterr().out

    def test_recovers_uid_with_wrong_owner(self, diagnose, workspace, config):
        resolved, reason = diagnose.resolve_collection_uid(config, DEFAULT_ID, f"999-{OTHER_ID}")

        assert resolved == f"12345678-{OTHER_ID}"
        assert reason == "resolved_suffix"

    def test_unknown_collection(self, diagnose, workspace, monkeypatch):
        monkeypatch.setenv("POSTMAN_COLLECTION_UID", DEFAULT_UID)

        assert diagnose.main() == 8

    def test_invalid_format(self, diagnose, config, requests_mock):
        assert diagnose.resolve_collection_uid(config, DEFAULT_ID, "payments") == (None, "invalid_format")
        assert not requests_mock.called

    def test_workspace_not_found(self, diagnose, requests_mock):
        requests_mock.get(f"{BASE_URL}/workspaces/{DEFAULT_ID}", status_code=404, json={"error": "notFound"})

        assert diagnose.main() == 4

    def test_missing_workspace_env(self, diagnose, monkeypatch, requests_mock):
        monkeypatch.delenv("POSTMAN_WORKSPACE_ID")

        assert diagnose.main() == 2
        assert not requests_mock.called


WORKSPACES = {"workspaces": [
    {"id": DEFAULT_ID, "name": "SDK Test Updated", "type": "personal", "visibility": "personal"},
    {"id": OTHER_ID, "name": "test workspace", "type": "team", "visibility": "team"},
    {"id": "0b3a1d52-6f0e-4c7a-8d9b-2e4f6a8c0d1e", "name": "Production", "type": "team"},
]}


class TestGetTestWorkspaces:

    @pytest.fixture
    def get_workspaces(self, scripts):
        return scripts("get_test_workspaces")

    def test_pattern_is_case_insensitive_wildcard(self, get_workspaces, config, requests_mock):
        requests_mock.get(f"{BASE_URL}/workspaces", json=WORKSPACES)

        matched, total = get_workspaces.find_workspaces(config, "*TEST*")

        assert [ws["id"] for ws in matched] == [DEFAULT_ID, OTHER_ID]
        assert total == 3

    def test_pattern_matches_whole_name(self, get_workspaces, config, requests_mock):
        requests_mock.get(f"{BASE_URL}/workspaces", json=WORKSPACES)

        matched, _ = get_workspaces.find_workspaces(config, "test*")

        assert [ws["name"] for ws in matched] == ["test workspace"]

    def test_regex_characters_are_literal(self, get_workspaces, config, requests_mock):
        requests_mock.get(f"{BASE_URL}/workspaces", json={"workspaces": [
            {"id": DEFAULT_ID, "name": "a.b (1)"},
            {"id": OTHER_ID, "name": "axb (1)"},
        ]})

        matched, _ = get_workspaces.find_workspaces(config, "a.b (*)")

        assert [ws["id"] for ws in matched] == [DEFAULT_ID]

    def test_main_lists_all_without_pattern(self, get_workspaces, requests_mock, capsys):
        requests_mock.get(f"{BASE_URL}/workspaces", json=WORKSPACES)

        assert get_workspaces.main([]) == 0

        out = capsys.readouterr().out
        assert "Total: 3 workspace(s)" in out
        assert "Filtered" not in out

    def test_main_reports_filtering(self, get_workspaces, requests_mock, capsys):
        requests_mock.get(f"{BASE_URL}/workspaces", json=WORKSPACES)

        assert get_workspaces.main(["Production"]) == 0
        assert "(Filtered from 3 total workspaces)" in capsys.readouterr().out

    def test_api_failure(self, get_workspaces, requests_mock):
        requests_mock.get(f"{BASE_URL}/workspaces", status_code=401, json={"error": "unauthorized"})

        assert get_workspaces.main(["*"]) == 1


class TestDeleteTestWorkspaces:

    @pytest.fixture
    def delete_workspaces(self, scripts, monkeypatch, tmp_path):
        module = scripts("delete_test_workspaces")
        monkeypatch.setattr(module, "LOG_PATH", tmp_path / "delete.log")
        return module

    def test_delete_by_pattern(self, delete_workspaces, requests_mock, tmp_path):
        requests_mock.get(f"{BASE_URL}/workspaces", json=WORKSPACES)
        requests_mock.delete(f"{BASE_URL}/workspaces/{DEFAULT_ID}", json={})
        requests_mock.delete(f"{BASE_URL}/workspaces/{OTHER_ID}", json={})

        assert delete_workspaces.main(["*test*", "--force"]) == 0

        deletes = [r.url for r in requests_mock.request_history if r.method == "DELETE"]
        assert deletes == [f"{BASE_URL}/workspaces/{DEFAULT_ID}", f"{BASE_URL}/workspaces/{OTHER_ID}"]
        assert [e["status"] for e in read_log(tmp_path / "delete.log")] == ["deleted", "deleted"]

    def test_delete_by_id(self, delete_workspaces, requests_mock):
        requests_mock.get(f"{BASE_URL}/workspaces/{DEFAULT_ID}", json={"workspace": WORKSPACES["workspaces"][0]})
        requests_mock.delete(f"{BASE_URL}/workspaces/{DEFAULT_ID}", json={})

        assert delete_workspaces.main(["--workspace-id", DEFAULT_ID, "--force"]) == 0
        assert requests_mock.last_request.method == "DELETE"

    def test_confirmation_declined(self, delete_workspaces, requests_mock, monkeypatch):
        requests_mock.get(f"{BASE_URL}/workspaces", json=WORKSPACES)
        monkeypatch.setattr("builtins.input", lambda prompt: "n")

        assert delete_workspaces.main(["Production"]) == 1
        assert all(r.method == "GET" for r in requests_mock.request_history)

    def test_confirmation_accepted(self, delete_workspaces, requests_mock, monkeypatch):
        requests_mock.get(f"{BASE_URL}/workspaces", json=WORKSPACES)
        requests_mock.delete(f"{BASE_URL}/workspaces/{OTHER_ID}", json={})
        monkeypatch.setattr("builtins.input", lambda prompt: "YES")

        assert delete_workspaces.main(["test workspace"]) == 0
        assert requests_mock.last_request.method == "DELETE"

    def test_no_match(self, delete_workspaces, requests_mock):
        requests_mock.get(f"{BASE_URL}/workspaces", json=WORKSPACES)

        assert delete_workspaces.main(["nothing*", "--force"]) == 0
        assert requests_mock.call_count == 1

    def test_failed_delete_is_reported(self, delete_workspaces, requests_mock, capsys):
        requests_mock.get(f"{BASE_URL}/workspaces", json=WORKSPACES)
        requests_mock.delete(f"{BASE_URL}/workspaces/{OTHER_ID}", status_code=403, json={"error": "forbidden"})

        assert delete_workspaces.main(["test workspace", "--force"]) == 1
        assert "Failed: 1" in capsys.readouterr().out

    @pytest.mark.parametrize("argv", [[], ["--workspace-id", " "]])
    def test_pattern_or_id_required(self, delete_workspaces, requests_mock, argv):
        assert delete_workspaces.main(argv) == 1
        assert not requests_mock.called
