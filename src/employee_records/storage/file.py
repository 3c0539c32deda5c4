"""JSON-file-backed record store engine.

The whole collection set lives in memory and is mirrored to a single
pretty-printed JSON document:

    {
      "employees": {"emp-1": {...}},
      "education": {},
      "training": {"<uuid>": {...}},
      ...
    }

Every mutation rewrites the full document synchronously, so a change is on
disk before the call returns. The write is not atomic and failures are only
logged: memory stays authoritative for the life of the process.
"""

from __future__ import annotations

import json
import logging
from pathlib import Path

from employee_records.storage.memory import MemoryStorage
from employee_records.storage.seed import sample_data

logger = logging.getLogger(__name__)

DATA_FILE_NAME = "storage.json"


class FileStorage(MemoryStorage):
    """Storage engine persisting to ``<data_dir>/storage.json``."""

    backend = "file"

    def __init__(self, data_dir: str | Path = "./data") -> None:
        super().__init__()
        self.data_dir = Path(data_dir)
        self.data_file = self.data_dir / DATA_FILE_NAME
        self.data_dir.mkdir(parents=True, exist_ok=True)
        self._load()

    def _load(self) -> None:
        """Adopt the data file, or seed sample data if it is missing or not a JSON object.

        Individual records that fail validation do not trigger the seed; they
        are skipped in memory and written back as stored.
        """
        if self.data_file.exists():
            logger.info("Loading data from file: %s", self.data_file)
            try:
                self._adopt(json.loads(self.data_file.read_text(encoding="utf-8")))
            except (OSError, ValueError):
                logger.exception("Error loading data file %s", self.data_file)
            else:
                logger.info("Data loaded successfully")
                return
        else:
            logger.info("No existing data file found, initializing with sample data")

        self._adopt(sample_data())
        self._persist()
        logger.info("Sample data initialized and saved")

    def _persist(self) -> None:
        try:
            self.data_file.write_text(json.dumps(self.snapshot(), indent=2), encoding="utf-8")
        except OSError:
            logger.exception("Error saving data to %s", self.data_file)
        else:
            logger.debug("Data saved successfully to %s", self.data_file)
