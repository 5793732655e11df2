import logging
from fastapi import APIRouter, Depends, HTTPException, status
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session
from app.api.deps import get_user_repository
from app.core.errors import ValidationFailed
from app.core.security import (
    hash_password, verify_password, create_access_token, get_current_user,
    get_token_data, revoke_token,
)
from app.db.models.user import User
from app.db.session import get_db
from app.repositories.user import UserRepository
from app.schemas.message import Message
from app.schemas.token import AuthResponse, TokenData
from app.schemas.user import UserCreate, UserLogin, UserOut

logger = logging.getLogger(__name__)

router = APIRouter()


@router.post("/register", response_model=AuthResponse, status_code=status.HTTP_201_CREATED)
def register(user_in: UserCreate, users: UserRepository = Depends(get_user_repository)):
    if user_in.password_confirmation is not None and user_in.password_confirmation != user_in.password:
        raise ValidationFailed({"password": ["The password field confirmation does not match."]})
    if users.find_by_email(user_in.email):
        raise ValidationFailed({"email": ["The email has already been taken."]})

    try:
        new_user = users.create({
            "email": user_in.email,
            "firstname": user_in.firstname,
            "lastname": user_in.lastname,
            "password": hash_password(user_in.password),
        })
    except SQLAlchemyError as e:
        users.db.rollback()
        logger.error(f"Database error: {str(e)}")
        raise HTTPException(500, "Failed to register user")

    token = create_access_token({"sub": new_user.email})
    return {"user": new_user, "token": token}


@router.post("/login", response_model=AuthResponse)
def login(credentials: UserLogin, users: UserRepository = Depends(get_user_repository)):
    user = users.find_by_email(credentials.email)
    if not user or not verify_password(credentials.password, user.password):
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Incorrect email or password",
        )

    token = create_access_token({"sub": user.email})
    return {"user": user, "token": token}


@router.post("/logout", response_model=Message)
def logout(
    token_data: TokenData = Depends(get_token_data),
    db: Session = Depends(get_db),
):
    revoke_token(db, token_data.jti)
    return {"message": "Successfully logged out"}


@router.get("/user", response_model=UserOut)
def me(current_user: User = Depends(get_current_user)):
    return current_user
