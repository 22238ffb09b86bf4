from typing import List, Optional
from sqlmodel import Session, select
from brandsbridge.core.exceptions import ServiceError
from brandsbridge.core.logging import get_logger
from brandsbridge.core.security import hash_password, verify_password
from brandsbridge.models.user import User
from brandsbridge.schemas.user import UserCreate, UserUpdate
from brandsbridge.services import crud

logger = get_logger(__name__)

LABEL = "User"
EMAIL_CONFLICT = "User with this email already exists"


def authenticate(db: Session, email: str, password: str) -> Optional[User]:
    user = db.exec(select(User).where(User.email == email)).first()
    if not user or not verify_password(password, user.password_hash):
        return None
    return user


def list_users(db: Session) -> List[User]:
    return list(db.exec(select(User).order_by(User.id)).all())


def get_user(db: Session, user_id: int) -> User:
    return crud.get_or_404(db, User, user_id, LABEL)


def create_user(db: Session, data: UserCreate) -> User:
    crud.ensure_unique(db, User, "email", data.email, LABEL)

    values = data.model_dump(exclude={"password"})
    user = User(**values, password_hash=hash_password(data.password))
    crud.save(db, user, EMAIL_CONFLICT)
    logger.info("User created", user_id=user.id, role=user.role.value)
    return user


def update_user(db: Session, user_id: int, data: UserUpdate) -> User:
    user = get_user(db, user_id)
    changes = crud.collect_changes(data, ("email", "password", "role", "is_active"))

    if changes.get("email"):
        crud.ensure_unique(db, User, "email", changes["email"], LABEL, exclude_id=user_id)
    if "password" in changes:
        changes["password_hash"] = hash_password(changes.pop("password"))

    crud.apply_changes(user, changes)
    crud.save(db, user, EMAIL_CONFLICT)
    logger.info("User updated", user_id=user_id, fields=sorted(changes))
    return user


def delete_user(db: Session, user_id: int, current_user: User) -> dict:
    if user_id == current_user.id:
        raise ServiceError("You cannot delete your own account", 400)
    user = get_user(db, user_id)
    return crud.delete_obj(db, user, LABEL)
