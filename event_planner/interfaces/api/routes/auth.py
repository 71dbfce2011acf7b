"""Endpoints for registration and token issuance."""

import logging
from datetime import timedelta

from fastapi import APIRouter, Depends, HTTPException, status
from fastapi.security import OAuth2PasswordRequestForm
from sqlalchemy.orm import Session

from event_planner.application.use_cases.users import (
    AuthenticationStatus,
    authenticate_user,
    register_user as register_user_uc,
)
from event_planner.config import get_settings
from event_planner.infrastructure.database import get_db
from event_planner.infrastructure.security import create_access_token
from event_planner.interfaces.api.schemas import Token, UserCreate, UserRead

router = APIRouter(prefix="/auth", tags=["auth"])
logger = logging.getLogger(__name__)


@router.post("/register", response_model=UserRead, status_code=status.HTTP_201_CREATED)
def register_user(user_in: UserCreate, db: Session = Depends(get_db)):
    """Create a new account."""

    user = register_user_uc(
        db,
        username=user_in.username,
        email=user_in.email,
        password=user_in.password,
        avatar_url=user_in.avatar_url,
    )
    logger.info("Registered user %s", user.id)
    return UserRead.model_validate(user)


# OAuth2PasswordRequestForm calls the login field "username"; an email works too.
@router.post("/token", response_model=Token)
def login_for_access_token(
    form_data: OAuth2PasswordRequestForm = Depends(),
    db: Session = Depends(get_db),
):
    """Authenticate by username or email and return a JWT bearer token."""

    user, auth_status = authenticate_user(db, form_data.username, form_data.password)

    if auth_status is AuthenticationStatus.INVALID_CREDENTIALS:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail={
                "code": "INVALID_CREDENTIALS",
                "message": "Incorrect username or password",
            },
            headers={"WWW-Authenticate": "Bearer"},
        )

    if auth_status is AuthenticationStatus.INACTIVE:
        raise HTTPException(
            status_code=status.HTTP_403_FORBIDDEN,
            detail={"code": "USER_INACTIVE", "message": "This account is disabled"},
            headers={"WWW-Authenticate": "Bearer"},
        )

    expires = timedelta(minutes=get_settings().access_token_expire_minutes)
    access_token = create_access_token(data={"sub": str(user.id)}, expires_delta=expires)
    return {"access_token": access_token, "token_type": "bearer"}
