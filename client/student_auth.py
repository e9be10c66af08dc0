# client/student_auth.py
import logging
from typing import Any, Dict, List, Optional
from urllib.parse import quote

import requests

from client.session import StudentSession

log = logging.getLogger("marks_portal.client")

NETWORK_ERROR = "Network error. Please check if server is running."


class PortalClient:
    """Talks to the marks portal API on behalf of one student session."""

    def __init__(self, base_url: str, session: Optional[StudentSession] = None, timeout: float = 10) -> None:
        self.api_base_url = base_url.rstrip("/") + "/api"
        self.session = session or StudentSession()
        self.timeout = timeout
        self.http = requests.Session()

    def _call(self, method: str, path: str, **kwargs) -> Dict[str, Any]:
        resp = self.http.request(method, f"{self.api_base_url}{path}", timeout=self.timeout, **kwargs)
        return resp.json()

    # ---------- login / session ----------
    def authenticate_student(self, email: str, password: str) -> Dict[str, Any]:
        log.info("Attempting login with email: %s", email)
        try:
            result = self._call("POST", "/auth/student", json={"email": email, "password": password})
        except (requests.RequestException, ValueError) as e:
            log.error("Login error: %s", e)
            return {"success": False, "message": NETWORK_ERROR}

        if not result.get("success"):
            log.info("Login failed: %s", result.get("message"))
            return {"success": False, "message": result.get("message")}

        self.session.set_student(result["data"])
        log.info("Login successful for: %s", result["data"].get("name"))
        return {"success": True, "message": "Login successful", "student": result["data"]}

    def get_current_student(self) -> Optional[Dict[str, Any]]:
        return self.session.current_student()

    def logout(self) -> Dict[str, Any]:
        self.session.clear()
        return {"success": True, "message": "Logged out successfully"}

    # ---------- marks ----------
    def get_student_marks(self, roll_no: str) -> Optional[Dict[str, Any]]:
        return self._data_or_none("GET", f"/marks/{quote(roll_no, safe='')}", "fetch marks")

    def update_student_marks(self, roll_no: str, subject_marks: Dict[str, Dict[str, Any]]) -> Optional[Dict[str, Any]]:
        return self._data_or_none(
            "PUT", f"/marks/{quote(roll_no, safe='')}", "update marks", json={"subjects": subject_marks}
        )

    def update_subject_marks(self, roll_no: str, subject: str, **fields) -> Optional[Dict[str, Any]]:
        path = f"/marks/{quote(roll_no, safe='')}/{quote(subject, safe='')}"
        return self._data_or_none("PATCH", path, "update subject marks", json=fields)

    def _data_or_none(self, method: str, path: str, action: str, **kwargs) -> Optional[Any]:
        try:
            result = self._call(method, path, **kwargs)
        except (requests.RequestException, ValueError) as e:
            log.error("Error trying to %s: %s", action, e)
            return None

        if not result.get("success"):
            log.error("Failed to %s: %s", action, result.get("message"))
            return None
        return result.get("data")

    # ---------- roster ----------
    def _all_students(self) -> List[Dict[str, Any]]:
        return self._data_or_none("GET", "/students", "list students") or []

    def search_students(self, query: str) -> List[Dict[str, Any]]:
        needle = query.lower()
        return [
            s for s in self._all_students()
            if needle in str(s.get("name", "")).lower()
            or needle in str(s.get("roll_no", "")).lower()
            or needle in str(s.get("email", "")).lower()
        ]

    def get_students_by_section(self, section: str) -> List[Dict[str, Any]]:
        return [s for s in self._all_students() if s.get("section") == section]

    def validate_student(self, roll_no: str) -> Dict[str, Any]:
        try:
            result = self._call("GET", f"/students/{quote(roll_no, safe='')}")
        except (requests.RequestException, ValueError) as e:
            log.error("Error validating student: %s", e)
            return {"valid": False, "message": "Network error"}

        if result.get("success"):
            return {"valid": True, "student": result["data"]}
        return {"valid": False, "message": "Student not found"}
