# client/session.py
import json
import os
from typing import Any, Dict, Optional


class StudentSession:
    """
    Logged-in student for one UI session.

    Kept in memory and mirrored to a small JSON file so a new process can
    pick the session back up. Pass one of these to whatever renders views
    instead of reaching for a global.
    """

    def __init__(self, path: Optional[str] = None) -> None:
        self.path = path
        self.student: Optional[Dict[str, Any]] = None

    def set_student(self, profile: Dict[str, Any]) -> None:
        self.student = profile
        self.save()

    def current_student(self) -> Optional[Dict[str, Any]]:
        if self.student:
            return self.student
        return self.load()

    def save(self) -> None:
        if not self.path:
            return
        with open(self.path, "w", encoding="utf-8") as f:
            json.dump({"currentStudent": self.student}, f, indent=2)

    def load(self) -> Optional[Dict[str, Any]]:
        if not self.path or not os.path.exists(self.path):
            return None
        with open(self.path, "r", encoding="utf-8") as f:
            stored = json.load(f)
        self.student = stored.get("currentStudent") if isinstance(stored, dict) else None
        return self.student

    def clear(self) -> None:
        self.student = None
        if self.path and os.path.exists(self.path):
            os.remove(self.path)
