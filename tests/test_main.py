"""
Tests for the command-line entry point (main.py).

Verifies:
- A valid profile file prints the settings payload and exits 0
- An invalid profile prints the structured error and exits 1
- Unreadable JSON prints a VALIDATION_ERROR response and exits 2
- stdin is used when no file is given
"""

from __future__ import annotations

import io
import json

import pytest

from main import load_document, run
from src.lib.exceptions import SerializationError


@pytest.fixture()
def profile_file(tmp_path, full_document):
    path = tmp_path / "profile.json"
    path.write_text(json.dumps(full_document), encoding="utf-8")
    return path


class TestRun:
    """Test run()."""

    def test_valid_profile(self, profile_file) -> None:
        """Settings are printed as JSON."""
        stdout = io.StringIO()
        assert run([str(profile_file)], stdout=stdout) == 0
        payload = json.loads(stdout.getvalue())
        assert payload["lighting"]["default"]["colorTemp"] == {"min": 2700, "max": 2700}
        assert payload["notifications"]["checkInInterval"] == 60
        assert payload["stressResponse"]["undoTimeout"] == 30

    def test_invalid_profile(self, tmp_path) -> None:
        """An invalid sensitivity prints the error response and exits 1."""
        path = tmp_path / "bad.json"
        path.write_text(json.dumps({"lightSensitivity": 0}), encoding="utf-8")
        stdout = io.StringIO()
        assert run([str(path), "--lang", "de"], stdout=stdout) == 1
        error = json.loads(stdout.getvalue())["error"]
        assert error["code"] == "INVALID_PROFILE"
        assert error["details"]["field"] == "lightSensitivity"
        assert "Lichtempfindlichkeit" in error["message"]

    def test_unreadable_json(self, tmp_path) -> None:
        """Malformed JSON exits 2 with a structured validation error."""
        path = tmp_path / "broken.json"
        path.write_text("{not json", encoding="utf-8")
        stdout = io.StringIO()
        assert run([str(path)], stdout=stdout) == 2
        payload = json.loads(stdout.getvalue())
        assert "lighting" not in payload
        assert payload["error"]["code"] == "VALIDATION_ERROR"
        assert "not valid JSON" in payload["error"]["details"]["reason"]

    def test_non_object_json_localized(self, tmp_path) -> None:
        """A JSON array is rejected with a localized validation error."""
        path = tmp_path / "list.json"
        path.write_text("[1, 2]", encoding="utf-8")
        stdout = io.StringIO()
        assert run([str(path), "--lang", "de"], stdout=stdout) == 2
        error = json.loads(stdout.getvalue())["error"]
        assert error["code"] == "VALIDATION_ERROR"
        assert error["message"].startswith("Das Profil konnte")
        assert error["details"] == {"reason": "profile JSON must be an object"}

    def test_reads_stdin(self, monkeypatch) -> None:
        """Without a file argument the profile is read from stdin."""
        monkeypatch.setattr("sys.stdin", io.StringIO(json.dumps({"lightSensitivity": 5})))
        stdout = io.StringIO()
        assert run([], stdout=stdout) == 0
        assert json.loads(stdout.getvalue())["lighting"]["default"]["transitionSpeed"] == "slow"


class TestLoadDocument:
    """Test load_document()."""

    def test_object_required(self) -> None:
        """A JSON array is not a profile document."""
        with pytest.raises(SerializationError):
            load_document(io.StringIO("[1, 2]"))

    def test_invalid_json(self) -> None:
        """Invalid JSON raises SerializationError."""
        with pytest.raises(SerializationError):
            load_document(io.StringIO("nope"))
