# backend/database.py
import json
import os
import shutil
import tempfile
import threading
from contextlib import contextmanager

from flask import current_app

from utils.errors import ReadError, WriteError
from utils.logger import get_logger

log = get_logger("database")

# COLLECTIONS
STUDENTS = "students"
MARKS = "marks"


class JsonCollection:
    """One named collection persisted as a top-level JSON array in a file."""

    def __init__(self, name, path):
        self.name = name
        self.path = path
        self._lock = threading.Lock()

    @contextmanager
    def locked(self):
        # held around a whole load-merge-save cycle; only guards this process
        with self._lock:
            yield self

    def load(self):
        try:
            with open(self.path, "r", encoding="utf-8") as f:
                data = json.load(f)
        except (OSError, ValueError) as e:
            log.error("Error reading %s: %s", self.path, e)
            raise ReadError(f"Failed to read {self.name} data") from e

        if not isinstance(data, list):
            log.error("Error reading %s: top level is %s, not a list", self.path, type(data).__name__)
            raise ReadError(f"Failed to read {self.name} data")
        return data

    def save(self, records):
        directory = os.path.dirname(os.path.abspath(self.path))
        tmp_path = None
        try:
            payload = json.dumps(list(records), indent=2, ensure_ascii=False)
            fd, tmp_path = tempfile.mkstemp(dir=directory, prefix=f".{self.name}.", suffix=".tmp")
            with os.fdopen(fd, "w", encoding="utf-8") as f:
                f.write(payload)
            self._match_mode(tmp_path)
            os.replace(tmp_path, self.path)
        except (OSError, TypeError, ValueError) as e:
            log.error("Error writing %s: %s", self.path, e)
            if tmp_path and os.path.exists(tmp_path):
                os.remove(tmp_path)
            raise WriteError(f"Failed to save {self.name}") from e

    def _match_mode(self, tmp_path):
        # mkstemp creates 0600; keep the data file readable as before the swap
        if os.path.exists(self.path):
            shutil.copymode(self.path, tmp_path)
            return
        umask = os.umask(0)
        os.umask(umask)
        os.chmod(tmp_path, 0o666 & ~umask)


# =====================================================
# APP WIRING
# =====================================================
def init_db(app):
    app.extensions["record_store"] = {
        STUDENTS: JsonCollection(STUDENTS, app.config["STUDENTS_FILE"]),
        MARKS: JsonCollection(MARKS, app.config["MARKS_FILE"]),
    }


def get_collection(name):
    return current_app.extensions["record_store"][name]


def load(collection):
    return get_collection(collection).load()


def save(collection, records):
    get_collection(collection).save(records)


def find_record(records, key, value):
    for index, record in enumerate(records):
        if isinstance(record, dict) and record.get(key) == value:
            return index, record
    return -1, None
