"""Unit tests for StorageService."""
import json
import os
import threading

import pytest

from src.services.storage_service import ensure_json_file, load_json, lock_file, save_json


@pytest.fixture
def temp_json_file(tmp_path):
    """Create a temporary JSON file for testing."""
    file_path = tmp_path / "test.json"
    file_path.write_text(json.dumps({"test": "data", "number": 42}), encoding="utf-8")
    return str(file_path)


class TestLoadJson:
    """Test load_json function."""

    def test_load_valid_json(self, temp_json_file):
        """Test loading valid JSON file."""
        data = load_json(temp_json_file)
        assert data["test"] == "data"
        assert data["number"] == 42

    def test_load_nonexistent_file_raises_error(self):
        """Test loading non-existent file raises FileNotFoundError."""
        with pytest.raises(FileNotFoundError, match="File not found"):
            load_json("/nonexistent/path/file.json")

    def test_load_malformed_json_raises_error(self, tmp_path):
        """Test loading malformed JSON raises JSONDecodeError."""
        file_path = tmp_path / "malformed.json"
        file_path.write_text("{invalid json", encoding="utf-8")

        with pytest.raises(json.JSONDecodeError, match="Malformed JSON"):
            load_json(str(file_path))


class TestSaveJson:
    """Test save_json function."""

    def test_save_and_reload_utf8(self, tmp_path):
        """Chinese characters are written as UTF-8, not escaped."""
        file_path = tmp_path / "speakers.json"
        save_json(str(file_path), {"name": "王小明"})

        assert "王小明" in file_path.read_text(encoding="utf-8")
        assert load_json(str(file_path)) == {"name": "王小明"}

    def test_creates_parent_directory(self, tmp_path):
        """Missing parent directories are created."""
        file_path = tmp_path / "nested" / "dir" / "data.json"
        save_json(str(file_path), {"ok": True})
        assert file_path.exists()

    def test_no_temp_files_left_behind(self, tmp_path):
        """The temporary file is renamed over the target."""
        save_json(str(tmp_path / "data.json"), {"ok": True})
        assert [p.name for p in tmp_path.iterdir()] == ["data.json"]

    def test_unserializable_data_raises_ioerror(self, tmp_path):
        """Unserializable data raises IOError and leaves no temp file."""
        with pytest.raises(IOError, match="Failed to write file"):
            save_json(str(tmp_path / "data.json"), {"bad": object()})

        assert list(tmp_path.iterdir()) == []


class TestEnsureJsonFile:
    """Test ensure_json_file function."""

    def test_creates_missing_file(self, tmp_path):
        """A missing file is created with the default content."""
        file_path = tmp_path / "speakers.json"
        ensure_json_file(str(file_path), {"speakers": []})
        assert load_json(str(file_path)) == {"speakers": []}

    def test_keeps_existing_file(self, temp_json_file):
        """An existing file is left untouched."""
        ensure_json_file(temp_json_file, {"speakers": []})
        assert load_json(temp_json_file)["test"] == "data"


class TestLockFile:
    """Test lock_file context manager."""

    def test_lock_missing_file_allows_creating_it(self, tmp_path):
        """A file that doesn't exist yet can be locked and then created."""
        file_path = str(tmp_path / "new" / "speakers.json")

        with lock_file(file_path):
            ensure_json_file(file_path, {"speakers": []})

        assert load_json(file_path) == {"speakers": []}

    def test_lock_allows_read_and_write(self, temp_json_file):
        """Data can be modified while the lock is held."""
        with lock_file(temp_json_file):
            data = load_json(temp_json_file)
            data["number"] = 43
            save_json(temp_json_file, data)

        assert load_json(temp_json_file)["number"] == 43

    def test_concurrent_writers_do_not_lose_updates(self, tmp_path):
        """Increments from several threads are all kept."""
        file_path = str(tmp_path / "counter.json")
        save_json(file_path, {"count": 0})

        def increment():
            for _ in range(5):
                with lock_file(file_path):
                    data = load_json(file_path)
                    data["count"] += 1
                    save_json(file_path, data)

        threads = [threading.Thread(target=increment) for _ in range(4)]
        for t in threads:
            t.start()
        for t in threads:
            t.join()

        assert load_json(file_path)["count"] == 20

    def test_lock_timeout(self, temp_json_file):
        """A second lock attempt times out while the first is held."""
        with lock_file(temp_json_file):
            errors = []

            def try_lock():
                try:
                    with lock_file(temp_json_file, timeout=0.2):
                        pass
                except TimeoutError as e:
                    errors.append(e)

            t = threading.Thread(target=try_lock)
            t.start()
            t.join()

        assert len(errors) == 1
        assert os.path.exists(temp_json_file)
