"""Low-level JSON file I/O operations with locking."""
import json
import os
import sys
import tempfile
import time
from contextlib import contextmanager
from typing import Any, Dict

if sys.platform != "win32":
    import fcntl


def load_json(file_path: str) -> Dict[str, Any]:
    """
    Load and parse JSON file with UTF-8 encoding.

    Raises:
        FileNotFoundError: If file doesn't exist
        json.JSONDecodeError: If JSON is malformed
    """
    if not os.path.exists(file_path):
        raise FileNotFoundError(f"File not found: {file_path}")

    with open(file_path, "r", encoding="utf-8") as f:
        try:
            return json.load(f)
        except json.JSONDecodeError as e:
            raise json.JSONDecodeError(
                f"Malformed JSON in {file_path}: {e.msg}",
                e.doc,
                e.pos
            )


def save_json(file_path: str, data: Dict[str, Any]) -> None:
    """
    Save data to JSON file atomically with UTF-8 encoding.

    The data is written to a temporary file in the same directory and then
    renamed over the target, so readers never see a half-written file.

    Raises:
        IOError: If write operation fails
    """
    dir_path = os.path.dirname(file_path)
    if dir_path:
        os.makedirs(dir_path, exist_ok=True)

    temp_fd, temp_path = tempfile.mkstemp(
        dir=dir_path if dir_path else ".",
        prefix=".tmp_",
        suffix=".json"
    )

    try:
        with os.fdopen(temp_fd, "w", encoding="utf-8") as f:
            json.dump(data, f, ensure_ascii=False, indent=2)
            f.flush()
            os.fsync(f.fileno())
        os.replace(temp_path, file_path)
    except (OSError, TypeError, ValueError) as e:
        if os.path.exists(temp_path):
            os.remove(temp_path)
        raise IOError(f"Failed to write file {file_path}: {e}") from e


def ensure_json_file(file_path: str, default: Dict[str, Any]) -> None:
    """Create ``file_path`` containing ``default`` if it doesn't exist yet."""
    if not os.path.exists(file_path):
        save_json(file_path, default)


@contextmanager
def lock_file(file_path: str, timeout: float = 5.0):
    """
    Context manager holding an exclusive lock on a data file.

    The lock lives on a ``.lock`` sidecar, so the data file itself may not
    exist yet; callers can create it while holding the lock.

    Usage:
        with lock_file('data/speakers.json'):
            data = load_json('data/speakers.json')
            data['speakers'].append(record)
            save_json('data/speakers.json', data)

    Raises:
        TimeoutError: If unable to acquire lock within timeout
    """
    dir_path = os.path.dirname(file_path)
    if dir_path:
        os.makedirs(dir_path, exist_ok=True)

    start_time = time.time()
    # Sidecar lock file, since save_json replaces the data file's inode
    lock_path = f"{file_path}.lock"

    if sys.platform == "win32":
        while True:
            try:
                lock_fd = os.open(lock_path, os.O_CREAT | os.O_EXCL | os.O_RDWR)
                break
            except FileExistsError:
                if time.time() - start_time > timeout:
                    raise TimeoutError(f"Could not acquire lock on {file_path} within {timeout}s")
                time.sleep(0.05)
        try:
            yield
        finally:
            os.close(lock_fd)
            os.remove(lock_path)
    else:
        lock_fd = open(lock_path, "a+")
        try:
            while True:
                try:
                    fcntl.flock(lock_fd.fileno(), fcntl.LOCK_EX | fcntl.LOCK_NB)
                    break
                except OSError:
                    if time.time() - start_time > timeout:
                        raise TimeoutError(f"Could not acquire lock on {file_path} within {timeout}s")
                    time.sleep(0.05)
            yield
        finally:
            fcntl.flock(lock_fd.fileno(), fcntl.LOCK_UN)
            lock_fd.close()
