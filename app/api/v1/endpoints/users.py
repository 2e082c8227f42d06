"""
User endpoints.

Profiles, admin role management and body measurements.
"""

from fastapi import APIRouter, Depends, Query, status
from sqlmodel import Session

from app.api.dependencies import get_current_admin, get_current_user
from app.db.session import get_db
from app.models.measurement import MeasurementType
from app.models.user import User
from app.schemas.measurement import MeasurementCreate, MeasurementResponse
from app.schemas.user import RoleUpdate, UserPublic, UserResponse, UserUpdate
from app.services.measurement_service import MeasurementService
from app.services.user_service import UserService

router = APIRouter()


@router.get("/",
            summary="List athletes.",
            response_model=list[UserPublic])
def list_users(
    skip: int = Query(0, ge=0),
    limit: int = Query(100, ge=1, le=500),
    current_user: User = Depends(get_current_user),
    db: Session = Depends(get_db),
):
    return UserService(db).list_users(skip=skip, limit=limit)


@router.get("/{user_id}",
            summary="Get an athlete's public profile.",
            response_model=UserPublic)
def get_user(user_id: int, current_user: User = Depends(get_current_user), db: Session = Depends(get_db)):
    return UserService(db).get_user_or_404(user_id)


@router.patch("/{user_id}",
              summary="Update a profile (self, or anyone as admin).",
              response_model=UserResponse)
def update_user(
    user_id: int,
    data: UserUpdate,
    current_user: User = Depends(get_current_user),
    db: Session = Depends(get_db),
):
    """Blank names are ignored."""
    return UserService(db).update_profile(current_user, user_id, data)


@router.put("/{user_id}/role",
            summary="Change a user's role (admin only).",
            response_model=UserResponse)
def set_role(
    user_id: int,
    data: RoleUpdate,
    current_user: User = Depends(get_current_admin),
    db: Session = Depends(get_db),
):
    return UserService(db).set_role(current_user, user_id, data.role)


@router.delete("/{user_id}",
               summary="Delete a user with their results and measurements (admin only).",
               status_code=status.HTTP_204_NO_CONTENT)
def delete_user(user_id: int, current_user: User = Depends(get_current_admin), db: Session = Depends(get_db)):
    UserService(db).delete_user(current_user, user_id)


# ======================================================================
# Measurements
# ======================================================================


@router.post("/{user_id}/measurements",
             summary="Record body measurements.",
             response_model=list[MeasurementResponse],
             status_code=status.HTTP_201_CREATED)
def add_measurements(
    user_id: int,
    data: MeasurementCreate,
    current_user: User = Depends(get_current_user),
    db: Session = Depends(get_db),
):
    return MeasurementService(db).add_measurements(current_user, user_id, data)


@router.get("/{user_id}/measurements",
            summary="Measurement history, newest first.",
            response_model=list[MeasurementResponse])
def measurement_history(
    user_id: int,
    limit: int = Query(50, ge=1, le=500),
    current_user: User = Depends(get_current_user),
    db: Session = Depends(get_db),
):
    return MeasurementService(db).get_history(user_id, limit=limit)


@router.get("/{user_id}/measurements/latest",
            summary="Latest value of every measurement type.",
            response_model=dict[MeasurementType, MeasurementResponse])
def latest_measurements(user_id: int, current_user: User = Depends(get_current_user), db: Session = Depends(get_db)):
    return MeasurementService(db).get_latest(user_id)
