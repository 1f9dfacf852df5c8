"""Storage collaborators persisting registered speakers."""
import logging
from typing import Any, Dict, List, Protocol

from src.models.speaker import Speaker
from src.services.storage_service import ensure_json_file, load_json, lock_file, save_json
from src.utils.exceptions import FileWriteError

logger = logging.getLogger(__name__)

# 資料檔案路徑
SPEAKERS_FILE = "data/speakers.json"


class SpeakerRepository(Protocol):
    """Anything that can store a speaker and hand back its identifier."""

    def add_speaker(self, speaker: Speaker) -> int:
        ...


class InMemorySpeakerRepository:
    """Keeps speakers in a list; ids start at 1."""

    def __init__(self):
        self.speakers: List[Speaker] = []

    def add_speaker(self, speaker: Speaker) -> int:
        self.speakers.append(speaker)
        return len(self.speakers)


class JsonSpeakerRepository:
    """
    Appends speaker records to a JSON file shaped like ``{"speakers": [...]}``.

    Writes happen under an exclusive file lock and replace the file
    atomically, so concurrent registrations never lose records.
    """

    def __init__(self, file_path: str = SPEAKERS_FILE):
        self.file_path = file_path

    def add_speaker(self, speaker: Speaker) -> int:
        """
        Persist a speaker record.

        Returns:
            int: One more than the highest id already stored

        Raises:
            FileWriteError: If the record could not be written
        """
        try:
            with lock_file(self.file_path):
                ensure_json_file(self.file_path, {"speakers": []})
                data = load_json(self.file_path)
                speakers = data.setdefault("speakers", [])

                speaker_id = max((s.get("id", 0) for s in speakers), default=0) + 1
                record = speaker.to_dict()
                record["id"] = speaker_id
                speakers.append(record)

                save_json(self.file_path, data)
        except (IOError, TimeoutError) as e:
            logger.error(f"Failed to persist speaker {speaker.email}: {e}")
            raise FileWriteError(f"Unable to save speaker to {self.file_path}") from e

        logger.debug(f"Persisted speaker {speaker_id} to {self.file_path}")
        return speaker_id

    def list_speakers(self) -> List[Dict[str, Any]]:
        """Return all stored speaker records, or an empty list if no file exists yet."""
        try:
            data = load_json(self.file_path)
        except FileNotFoundError:
            return []
        return data.get("speakers", [])
