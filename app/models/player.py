# app/models/player.py
from sqlalchemy import Column, String, Integer, Boolean, DateTime, Text
from sqlalchemy.sql import func
from app.database import Base

class Player(Base):
    """선수 모델 (투표 대상)"""
    __tablename__ = "players"
    # 삭제된 id 재사용 금지 (SQLite)
    __table_args__ = {"sqlite_autoincrement": True}
    
    # 기본 필드
    id = Column(Integer, primary_key=True, autoincrement=True)
    name = Column(String(255), nullable=False)
    team = Column(String(255), nullable=False)
    
    # 선택 정보
    image_url = Column(Text, nullable=True)
    position = Column(String(100), nullable=True)
    number = Column(Integer, nullable=True)  # 등번호
    
    # 비활성화된 선수는 목록/투표에서 제외
    is_active = Column(Boolean, nullable=False, default=True)
    
    # 타임스탬프
    created_at = Column(DateTime(timezone=True), server_default=func.now())
    updated_at = Column(DateTime(timezone=True), server_default=func.now(), onupdate=func.now())
    
    def __repr__(self):
        return f"<Player {self.name} ({self.team})>"
