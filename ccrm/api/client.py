"""
HTTP client for the CCRM REST API, built on requests.
"""

import logging
from typing import Any, Dict, List, Optional

import requests

from ..core.exceptions import CCRMException

logger = logging.getLogger(__name__)


class CCRMClientError(CCRMException):
    """Raised when the API answers with a non-success status or is unreachable."""
    
    def __init__(self, message: str, status_code: Optional[int] = None, **kwargs):
        super().__init__(message, **kwargs)
        self.status_code = status_code


class CCRMClient:
    """Thin wrapper over the REST endpoints."""
    
    def __init__(self, base_url: str, session: Optional[requests.Session] = None, timeout: float = 5.0):
        self._base_url = base_url.rstrip("/")
        self._session = session or requests.Session()
        self._timeout = timeout
    
    @property
    def base_url(self) -> str:
        return self._base_url
    
    def _request(self, method: str, path: str, **kwargs) -> Any:
        url = f"{self._base_url}{path}"
        try:
            response = self._session.request(method, url, timeout=self._timeout, **kwargs)
        except requests.RequestException as e:
            raise CCRMClientError(f"{method} {url} failed: {e}")
        
        if response.status_code >= 400:
            try:
                detail = response.json().get("detail", response.text)
            except ValueError:
                detail = response.text
            logger.debug("%s %s -> %s: %s", method, url, response.status_code, detail)
            raise CCRMClientError(f"{method} {path} returned {response.status_code}: {detail}",
                                  status_code=response.status_code)
        if response.status_code == 204 or not response.content:
            return None
        return response.json()
    
    def is_healthy(self) -> bool:
        try:
            return self._request("GET", "/health").get("status") == "healthy"
        except CCRMClientError:
            return False
    
    def add_student(self, student_id: str, reg_no: str, full_name: str, email: str) -> Dict[str, Any]:
        return self._request("POST", "/students", json={
            "id": student_id, "reg_no": reg_no, "full_name": full_name, "email": email,
        })
    
    def get_student(self, student_id: str) -> Dict[str, Any]:
        return self._request("GET", f"/students/{student_id}")
    
    def list_students(self) -> List[Dict[str, Any]]:
        return self._request("GET", "/students")
    
    def deactivate_student(self, student_id: str) -> Dict[str, Any]:
        return self._request("POST", f"/students/{student_id}/deactivate")
    
    def add_instructor(self, instructor_id: str, full_name: str, email: str, department: str) -> Dict[str, Any]:
        return self._request("POST", "/instructors", json={
            "id": instructor_id, "full_name": full_name, "email": email, "department": department,
        })
    
    def add_course(self, code: str, **fields) -> Dict[str, Any]:
        """Create a course; omitted fields take the server-side defaults."""
        payload = {"code": code}
        payload.update({key: value for key, value in fields.items() if value is not None})
        return self._request("POST", "/courses", json=payload)
    
    def list_courses(self) -> List[Dict[str, Any]]:
        return self._request("GET", "/courses")
    
    def enroll(self, student_id: str, course_code: str) -> Dict[str, Any]:
        return self._request("POST", "/enrollments", json={
            "student_id": student_id, "course_code": course_code,
        })
    
    def unenroll(self, student_id: str, course_code: str) -> None:
        self._request("DELETE", f"/enrollments/{student_id}/{course_code}")
    
    def record_grade(self, student_id: str, course_code: str, grade: str) -> Dict[str, Any]:
        return self._request("PUT", f"/enrollments/{student_id}/{course_code}/grade", json={"grade": grade})
    
    def transcript(self, student_id: str) -> Dict[str, Any]:
        return self._request("GET", f"/students/{student_id}/transcript")
