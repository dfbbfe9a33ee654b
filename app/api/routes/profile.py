"""The authenticated user's own profile."""

from typing import Annotated

from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from app.api.deps import get_current_user
from app.core.database import get_db
from app.schemas.auth import CurrentUser
from app.schemas.users import ProfileResponse, ProfileUpdateRequest, UserOut
from app.services.users import get_user, update_profile

router = APIRouter()


@router.get("", response_model=ProfileResponse)
def get_me(
    current_user: Annotated[CurrentUser, Depends(get_current_user)],
    db: Annotated[Session, Depends(get_db)],
) -> ProfileResponse:
    user = get_user(db, current_user.id)
    return ProfileResponse(user=UserOut.model_validate(user))


@router.patch("", response_model=ProfileResponse)
def patch_me(
    body: ProfileUpdateRequest,
    current_user: Annotated[CurrentUser, Depends(get_current_user)],
    db: Annotated[Session, Depends(get_db)],
) -> ProfileResponse:
    """Change email and/or password. The password must meet the registration policy."""
    user = update_profile(db, current_user.id, body)
    return ProfileResponse(user=UserOut.model_validate(user))
