"""
Base database configuration.

Import all models here so Alembic can detect them for migrations.
"""

# Import all models for Alembic autogenerate
from app.models.user import User  # noqa: F401
from app.models.result import Result  # noqa: F401
from app.models.measurement import Measurement  # noqa: F401
from app.models.program import BlockRow, Cycle, Phase, Program, Workout, WorkoutBlock  # noqa: F401
