import threading

from ccrm.core.entities import CourseBuilder, Student
from ccrm.persistence.registry import DataStore, Registry


class TestRegistry:
    def test_get_absent_returns_none(self):
        registry = Registry()
        assert registry.get("missing") is None
        assert "missing" not in registry

    def test_put_overwrites_last_write_wins(self):
        registry = Registry()
        first = Student("stu-1", "R1", "First", "a@uni.edu")
        second = Student("stu-1", "R2", "Second", "b@uni.edu")
        registry.put("stu-1", first)
        registry.put("stu-1", second)
        assert registry.get("stu-1") is second
        assert len(registry) == 1

    def test_values_is_a_snapshot(self):
        registry = Registry()
        registry.put("A", CourseBuilder(code="A").build())
        snapshot = registry.values()
        registry.put("B", CourseBuilder(code="B").build())
        assert len(snapshot) == 1
        assert len(registry.values()) == 2

    def test_clear(self):
        registry = Registry()
        registry.put("A", CourseBuilder(code="A").build())
        registry.clear()
        assert "A" not in registry
        assert len(registry) == 0

    def test_concurrent_puts_and_reads(self):
        registry = Registry()
        errors = []

        def writer(offset):
            for i in range(200):
                key = f"stu-{offset}-{i}"
                registry.put(key, Student(key, "R", "Name", "n@uni.edu"))

        def reader():
            try:
                for _ in range(200):
                    for student in registry.values():
                        student.id
            except Exception as e:
                errors.append(e)

        threads = [threading.Thread(target=writer, args=(n,)) for n in range(4)]
        threads += [threading.Thread(target=reader) for _ in range(2)]
        for thread in threads:
            thread.start()
        for thread in threads:
            thread.join()

        assert errors == []
        assert len(registry) == 800


class TestDataStore:
    def test_registries_are_independent(self):
        store = DataStore()
        store.students.put("X", Student("X", "R", "Name", "n@uni.edu"))
        assert store.courses.get("X") is None
        assert store.instructors.get("X") is None

    def test_separate_instances_do_not_share_state(self):
        first, second = DataStore(), DataStore()
        first.students.put("X", Student("X", "R", "Name", "n@uni.edu"))
        assert second.students.get("X") is None

    def test_statistics(self):
        store = DataStore()
        store.students.put("X", Student("X", "R", "Name", "n@uni.edu"))
        assert store.get_statistics() == {"students": 1, "courses": 0, "instructors": 0, "enrollments": 0}
        store.clear()
        assert store.get_statistics()["students"] == 0
