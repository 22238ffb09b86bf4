from fastapi import APIRouter, Depends, HTTPException, status, Response
from sqlmodel import Session
from brandsbridge.api.deps import get_db, access_security, get_current_user
from brandsbridge.core.logging import get_logger
from brandsbridge.models.user import User
from brandsbridge.schemas.common import MessageResponse
from brandsbridge.schemas.user import LoginRequest, AuthResponse, UserResponse
from brandsbridge.services import users as users_service

router = APIRouter(prefix="/api/auth", tags=["auth"])

logger = get_logger(__name__)


@router.post("/login", response_model=AuthResponse)
def login(data: LoginRequest, response: Response, db: Session = Depends(get_db)):
    """Вход в админку: токен в ответе и в HttpOnly cookie"""
    user = users_service.authenticate(db, data.email, data.password)

    if not user:
        logger.warning("Login failed", email=data.email)
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Invalid credentials"
        )

    if not user.is_active:
        raise HTTPException(
            status_code=status.HTTP_403_FORBIDDEN,
            detail="Account is inactive"
        )

    subject = {"id": user.id, "role": user.role.value}
    access_token = access_security.create_access_token(subject=subject)
    access_security.set_access_cookie(response, access_token)

    logger.info("User logged in", user_id=user.id)
    return AuthResponse(user=UserResponse.model_validate(user), access_token=access_token)


@router.post("/logout", response_model=MessageResponse)
def logout(response: Response):
    access_security.unset_access_cookie(response)
    return {"message": "Logged out"}


@router.get("/me", response_model=UserResponse)
def me(current_user: User = Depends(get_current_user)):
    return current_user
