# scripts/create_admin.py
"""
관리자 계정 생성

    python -m scripts.create_admin admin@hoopers.app 'password' --name "운영자"
"""
import argparse

from app.database import SessionLocal, engine, init_db
from app.models.user import UserRole
from app.services import user_service
from app.core.logger import logger

def main():
    parser = argparse.ArgumentParser(description="관리자 계정 생성")
    parser.add_argument("email")
    parser.add_argument("password")
    parser.add_argument("--name", default=None)
    args = parser.parse_args()

    if engine is None:
        raise SystemExit("DATABASE_URL이 설정되지 않았습니다")

    init_db()
    db = SessionLocal()
    try:
        user = user_service.create_password_user(
            db,
            email=args.email,
            password=args.password,
            name=args.name,
            role=UserRole.ADMIN
        )
        logger.info(f"관리자 계정 생성 완료: {user.email} (open_id: {user.open_id})")
    finally:
        db.close()

if __name__ == "__main__":
    main()
