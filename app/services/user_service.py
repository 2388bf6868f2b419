# app/services/user_service.py
import uuid
from datetime import datetime, timezone

from sqlalchemy.orm import Session

from app.config import settings
from app.core.security import hash_password, verify_password
from app.models.user import User, UserRole

def get_user_by_open_id(db: Session, open_id: str) -> User | None:
    return db.query(User).filter(User.open_id == open_id).first()

def get_user_by_email(db: Session, email: str) -> User | None:
    return db.query(User).filter(User.email == email).first()

def authenticate(db: Session, email: str, password: str) -> User | None:
    """이메일/비밀번호 확인 후 로그인 시각 갱신"""
    user = get_user_by_email(db, email)
    if not user or not verify_password(password, user.hashed_password):
        return None

    user.last_signed_in = datetime.now(timezone.utc)
    db.commit()
    db.refresh(user)
    return user

def upsert_user(
    db: Session,
    open_id: str,
    name: str | None = None,
    email: str | None = None,
    login_method: str | None = None,
    password: str | None = None,
    role: UserRole | None = None
) -> User:
    """
    유저 생성 또는 갱신
    - role 미지정 시 OWNER_OPEN_ID와 같으면 관리자
    - None 필드는 기존 값 유지
    """
    if not open_id:
        raise ValueError("open_id는 필수입니다")

    if role is None and settings.owner_open_id and open_id == settings.owner_open_id:
        role = UserRole.ADMIN

    user = get_user_by_open_id(db, open_id)
    if user is None:
        user = User(open_id=open_id, role=role or UserRole.USER)
        db.add(user)
    elif role is not None:
        user.role = role

    if name is not None:
        user.name = name
    if email is not None:
        user.email = email
    if login_method is not None:
        user.login_method = login_method
    if password is not None:
        user.hashed_password = hash_password(password)

    user.last_signed_in = datetime.now(timezone.utc)
    db.commit()
    db.refresh(user)
    return user

def create_password_user(db: Session, email: str, password: str, name: str | None = None, role: UserRole = UserRole.USER) -> User:
    """비밀번호 로그인 유저 생성"""
    existing = get_user_by_email(db, email)
    open_id = existing.open_id if existing else uuid.uuid4().hex
    return upsert_user(
        db,
        open_id=open_id,
        name=name,
        email=email,
        login_method="password",
        password=password,
        role=role
    )
