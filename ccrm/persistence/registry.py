"""
In-memory registries for students, courses and instructors.
"""

import threading
from typing import Dict, Generic, List, Optional, TypeVar

from ..core.entities import Course, Instructor, Student
from ..core.interfaces import Repository

T = TypeVar('T')


class Registry(Repository[T], Generic[T]):
    """Thread-safe keyed collection with last-write-wins semantics."""
    
    def __init__(self):
        self._items: Dict[str, T] = {}
        self._lock = threading.RLock()
    
    def put(self, key: str, entity: T) -> None:
        """Insert or silently overwrite the entry for key."""
        with self._lock:
            self._items[key] = entity
    
    def get(self, key: str) -> Optional[T]:
        """Find entity by key; None when absent."""
        with self._lock:
            return self._items.get(key)
    
    def values(self) -> List[T]:
        """Snapshot copy of the current entries, in no particular order."""
        with self._lock:
            return list(self._items.values())
    
    def clear(self) -> None:
        with self._lock:
            self._items.clear()
    
    def __contains__(self, key: object) -> bool:
        with self._lock:
            return key in self._items
    
    def __len__(self) -> int:
        with self._lock:
            return len(self._items)


class DataStore:
    """The three registries shared by every service of one platform instance."""
    
    def __init__(self):
        self._students: Registry[Student] = Registry()
        self._courses: Registry[Course] = Registry()
        self._instructors: Registry[Instructor] = Registry()
    
    @property
    def students(self) -> Registry[Student]:
        return self._students
    
    @property
    def courses(self) -> Registry[Course]:
        return self._courses
    
    @property
    def instructors(self) -> Registry[Instructor]:
        return self._instructors
    
    def clear(self) -> None:
        """Empty all registries."""
        self._students.clear()
        self._courses.clear()
        self._instructors.clear()
    
    def get_statistics(self) -> Dict[str, int]:
        """Get registry sizes."""
        students = self._students.values()
        return {
            'students': len(students),
            'courses': len(self._courses),
            'instructors': len(self._instructors),
            'enrollments': sum(len(s.enrollments) for s in students),
        }
