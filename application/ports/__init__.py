"""
Repository Interfaces (Ports) for the lift logic core.

This package defines abstract interfaces that decouple domain logic from
infrastructure (database, external services). Implementations live outside
this repository; in-memory fakes for tests are in tests/fakes.

Architecture follows the Ports & Adapters (Hexagonal) pattern:
- Ports: Abstract interfaces defined here (what the domain needs)
- Adapters: Concrete implementations supplied by the host application

Usage:
    from application.ports import LiftLogRepository, ExercisesRepository

    class WeightProgressionEngine:
        def __init__(self, lift_logs: LiftLogRepository, exercises: ExercisesRepository):
            self.lift_logs = lift_logs
            self.exercises = exercises
"""

# Exercise metadata and match candidates
from application.ports.exercises_repository import ExercisesRepository

# Lifting history
from application.ports.lift_log_repository import LiftLogRepository

__all__ = [
    "ExercisesRepository",
    "LiftLogRepository",
]
