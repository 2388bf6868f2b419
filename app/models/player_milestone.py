# app/models/player_milestone.py
from sqlalchemy import Column, Integer
from app.database import Base

class PlayerMilestone(Base):
    """선수별 이미 알림을 보낸 최고 득표 구간"""
    __tablename__ = "player_milestones"
    
    player_id = Column(Integer, primary_key=True, autoincrement=False)
    highest_notified = Column(Integer, nullable=False, default=0)
    
    def __repr__(self):
        return f"<PlayerMilestone {self.player_id}: {self.highest_notified}>"
