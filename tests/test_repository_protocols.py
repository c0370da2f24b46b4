"""
Tests for repository protocol definitions.

These tests verify that:
1. Protocol definitions are valid and importable
2. Protocols define the expected methods and signatures
3. The in-memory fakes satisfy the Protocol contracts
"""
import inspect

import pytest

# All tests in this module are pure logic tests - mark as unit
pytestmark = pytest.mark.unit


class TestProtocolImports:
    """Test that all protocols can be imported."""

    def test_lift_log_repository_import(self):
        """LiftLogRepository should be importable."""
        from application.ports import LiftLogRepository
        assert LiftLogRepository is not None

    def test_exercises_repository_import(self):
        """ExercisesRepository should be importable."""
        from application.ports import ExercisesRepository
        assert ExercisesRepository is not None


class TestLiftLogRepositoryProtocol:
    """Test LiftLogRepository protocol definition."""

    def test_has_required_methods(self):
        from application.ports import LiftLogRepository
        assert hasattr(LiftLogRepository, "get_logs")

    def test_get_logs_signature(self):
        """since and limit are keyword-only."""
        from application.ports import LiftLogRepository

        params = inspect.signature(LiftLogRepository.get_logs).parameters
        assert list(params)[:3] == ["self", "user_id", "exercise_id"]
        assert params["since"].kind == inspect.Parameter.KEYWORD_ONLY
        assert params["limit"].kind == inspect.Parameter.KEYWORD_ONLY
        assert params["since"].default is None
        assert params["limit"].default is None


class TestExercisesRepositoryProtocol:
    """Test ExercisesRepository protocol definition."""

    def test_has_required_methods(self):
        from application.ports import ExercisesRepository

        for method_name in ["get_by_id", "get_available_to_user"]:
            assert hasattr(ExercisesRepository, method_name), \
                f"ExercisesRepository should have method '{method_name}'"


class TestFakesSatisfyProtocols:
    """Test that the fakes expose the same methods as the protocols."""

    @pytest.mark.parametrize("protocol_name,fake_name", [
        ("LiftLogRepository", "FakeLiftLogRepository"),
        ("ExercisesRepository", "FakeExercisesRepository"),
    ])
    def test_fake_has_protocol_methods(self, protocol_name, fake_name):
        import application.ports as ports
        import tests.fakes as fakes

        protocol = getattr(ports, protocol_name)
        fake = getattr(fakes, fake_name)
        methods = [
            name for name, member in vars(protocol).items()
            if callable(member) and not name.startswith("_")
        ]
        assert methods
        for name in methods:
            assert hasattr(fake, name), f"{fake_name} is missing '{name}'"
            assert list(inspect.signature(getattr(fake, name)).parameters) == \
                list(inspect.signature(getattr(protocol, name)).parameters)


class TestFakeLiftLogRepository:
    """Test FakeLiftLogRepository behaviour the engines rely on."""

    def test_newest_first_and_limit(self):
        from datetime import datetime, timezone
        from tests.fakes import FakeLiftLogRepository

        repo = FakeLiftLogRepository()
        for day in (1, 3, 2):
            repo.add_log("u1", "squat", [(100, day)], logged_at=datetime(2024, 1, day, tzinfo=timezone.utc))

        logs = repo.get_logs("u1", "squat")
        assert [log.logged_at.day for log in logs] == [3, 2, 1]
        assert len(repo.get_logs("u1", "squat", limit=1)) == 1

    def test_since_filter(self):
        from datetime import datetime, timezone
        from tests.fakes import FakeLiftLogRepository

        repo = FakeLiftLogRepository()
        repo.add_log("u1", "squat", [(100, 5)], logged_at=datetime(2024, 1, 1, tzinfo=timezone.utc))
        repo.add_log("u1", "squat", [(100, 5)], logged_at=datetime(2024, 2, 1, tzinfo=timezone.utc))

        logs = repo.get_logs("u1", "squat", since=datetime(2024, 1, 15, tzinfo=timezone.utc))
        assert len(logs) == 1

    def test_reset(self):
        from tests.fakes import create_lift_log_repo

        repo = create_lift_log_repo(user_id="u1", exercise_id="squat", sessions=[[(100, 5)], [(105, 5)]])
        assert len(repo.get_logs("u1", "squat")) == 2
        repo.reset()
        assert repo.get_logs("u1", "squat") == []

    def test_integer_exercise_id(self):
        from tests.fakes import FakeLiftLogRepository

        repo = FakeLiftLogRepository()
        repo.add_log("u1", 42, [(100, 5)])

        logs = repo.get_logs("u1", 42)
        assert len(logs) == 1
        assert logs[0].exercise_id == 42
