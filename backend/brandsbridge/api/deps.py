from fastapi import Depends, HTTPException, status
from fastapi_jwt import JwtAccessBearerCookie, JwtAuthorizationCredentials
from sqlmodel import Session
from brandsbridge.db.session import engine
from brandsbridge.models.user import User, UserRole
from brandsbridge.core.config import settings

# JWT: Bearer header или HttpOnly cookie
access_security = JwtAccessBearerCookie(
    secret_key=settings.SECRET_KEY,
    auto_error=False,
    access_expires_delta=settings.jwt_expires_delta,
)


def get_db():
    with Session(engine) as session:
        yield session


def get_upload_dir() -> str:
    return settings.UPLOAD_DIR


async def get_current_user(
    credentials: JwtAuthorizationCredentials = Depends(access_security),
    db: Session = Depends(get_db)
) -> User:
    if credentials is None:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Not authenticated"
        )

    user_id = credentials.subject.get("id")
    if not user_id:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Invalid token"
        )

    user = db.get(User, int(user_id))
    if not user or not user.is_active:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="User not found or inactive"
        )

    return user


async def staff_required(
    current_user: User = Depends(get_current_user)
) -> User:
    # Любой активный пользователь админки (SUPER_ADMIN, ADMIN, EDITOR)
    return current_user


async def super_admin_required(
    current_user: User = Depends(get_current_user)
) -> User:
    if current_user.role != UserRole.SUPER_ADMIN:
        raise HTTPException(
            status_code=status.HTTP_403_FORBIDDEN,
            detail="Super admin access required"
        )
    return current_user
