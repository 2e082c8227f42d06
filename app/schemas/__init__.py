"""Pydantic schemas for request/response validation."""

from app.schemas.token import Token, TokenData
from app.schemas.user import RoleUpdate, UserCreate, UserLogin, UserPublic, UserResponse, UserUpdate
from app.schemas.result import ImportSummary, ResultCreate, ResultImport, ResultResponse
from app.schemas.measurement import MeasurementCreate, MeasurementResponse
from app.schemas.rating import Athlete, DisciplineRow, DisciplineStanding, OverallRow, RatingsResponse
from app.schemas.progression import Achievement, RankTitle, StandardLookup, StatLevel, UserStatsResponse

__all__ = [
    "Token",
    "TokenData",
    "RoleUpdate",
    "UserCreate",
    "UserLogin",
    "UserPublic",
    "UserResponse",
    "UserUpdate",
    "ImportSummary",
    "ResultCreate",
    "ResultImport",
    "ResultResponse",
    "MeasurementCreate",
    "MeasurementResponse",
    "Athlete",
    "DisciplineRow",
    "DisciplineStanding",
    "OverallRow",
    "RatingsResponse",
    "Achievement",
    "RankTitle",
    "StandardLookup",
    "StatLevel",
    "UserStatsResponse",
]
