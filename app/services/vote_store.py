# app/services/vote_store.py
from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import List

from sqlalchemy import func
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from app.core.exceptions import DuplicateVoteError
from app.core.logger import logger
from app.models.device_fingerprint import DeviceFingerprint
from app.models.player import Player
from app.models.player_milestone import PlayerMilestone
from app.models.vote import Vote

@dataclass
class RecordedVote:
    """투표 기록 결과"""
    vote: Vote
    vote_count: int  # 해당 선수의 새 득표수
    new_milestones: List[int] = field(default_factory=list)  # 이번에 처음 넘은 구간

class VoteStore:
    """선수/투표/기기 지문 저장소 (SQLAlchemy)"""

    def __init__(self, db: Session):
        self.db = db

    # ===== 선수 =====

    def list_active_players(self) -> List[Player]:
        return self.db.query(Player)\
            .filter(Player.is_active == True)\
            .order_by(Player.id)\
            .all()

    def get_player(self, player_id: int) -> Player | None:
        return self.db.query(Player).filter(Player.id == player_id).first()

    def create_player(self, data: dict) -> Player:
        """선수 생성 (알림 구간 행 함께 생성)"""
        player = Player(**data)
        self.db.add(player)
        try:
            self.db.flush()
            self.db.add(PlayerMilestone(player_id=player.id, highest_notified=0))
            self.db.commit()
        except Exception:
            self.db.rollback()
            raise
        self.db.refresh(player)
        return player

    def set_player_active(self, player_id: int, is_active: bool) -> Player | None:
        player = self.get_player(player_id)
        if not player:
            return None
        player.is_active = is_active
        self.db.commit()
        self.db.refresh(player)
        return player

    def delete_all_players(self) -> None:
        """모든 선수 삭제 (투표 + 기기 지문도 함께 삭제)"""
        try:
            self.db.query(Vote).delete(synchronize_session=False)
            self.db.query(DeviceFingerprint).delete(synchronize_session=False)
            self.db.query(PlayerMilestone).delete(synchronize_session=False)
            self.db.query(Player).delete(synchronize_session=False)
            self.db.commit()
        except Exception:
            self.db.rollback()
            raise

    # ===== 투표 조회 =====

    def list_votes_for_player(self, player_id: int) -> List[Vote]:
        return self.db.query(Vote)\
            .filter(Vote.player_id == player_id)\
            .order_by(Vote.created_at.desc(), Vote.id.desc())\
            .all()

    def count_votes_for_player(self, player_id: int) -> int:
        return self.db.query(func.count(Vote.id))\
            .filter(Vote.player_id == player_id)\
            .scalar() or 0

    def count_total_votes(self) -> int:
        return self.db.query(func.count(Vote.id)).scalar() or 0

    def has_device_voted(self, fingerprint: str) -> bool:
        record = self.db.query(DeviceFingerprint)\
            .filter(DeviceFingerprint.fingerprint == fingerprint)\
            .first()
        return bool(record and record.has_voted)

    def get_players_with_vote_counts(self) -> List[dict]:
        """활성 선수 + 득표수 (득표순)"""
        vote_count = func.count(Vote.id).label("vote_count")
        rows = self.db.query(Player, vote_count)\
            .outerjoin(Vote, Vote.player_id == Player.id)\
            .filter(Player.is_active == True)\
            .group_by(Player.id)\
            .order_by(vote_count.desc(), Player.id)\
            .all()

        return [{"player": player, "vote_count": count} for player, count in rows]

    # ===== 투표 기록 =====

    def record_vote(
        self,
        player_id: int,
        fingerprint: str,
        ip_address: str | None = None,
        user_agent: str | None = None,
        milestones: tuple = ()
    ) -> RecordedVote:
        """
        투표 기록 (하나의 트랜잭션)
        1. 기기 지문 선점 (유니크 제약, 실패 시 DuplicateVoteError)
        2. 투표 저장
        3. 득표수 계산 + 알림 구간 갱신
        """
        if milestones:
            self._ensure_milestone_row(player_id)

        now = datetime.now(timezone.utc)

        try:
            if not self._claim_fingerprint(fingerprint, now):
                raise DuplicateVoteError(fingerprint)

            vote = Vote(
                player_id=player_id,
                device_fingerprint=fingerprint,
                ip_address=ip_address,
                user_agent=user_agent
            )
            self.db.add(vote)
            self.db.flush()

            vote_count = self.count_votes_for_player(player_id)
            new_milestones = self._advance_milestone(player_id, vote_count, milestones)

            self.db.commit()
        except Exception:
            self.db.rollback()
            raise

        self.db.refresh(vote)
        return RecordedVote(vote=vote, vote_count=vote_count, new_milestones=new_milestones)

    def _find_fingerprint(self, fingerprint: str) -> DeviceFingerprint | None:
        return self.db.query(DeviceFingerprint)\
            .filter(DeviceFingerprint.fingerprint == fingerprint)\
            .first()

    def _claim_fingerprint(self, fingerprint: str, now: datetime) -> bool:
        """아직 투표하지 않은 지문이면 투표 완료로 표시"""

        # 기존 행이 있으면 조건부 업데이트 (has_voted=False일 때만)
        updated = self.db.query(DeviceFingerprint)\
            .filter(
                DeviceFingerprint.fingerprint == fingerprint,
                DeviceFingerprint.has_voted == False
            )\
            .update({"has_voted": True, "last_vote_at": now}, synchronize_session=False)
        if updated:
            return True

        if self._find_fingerprint(fingerprint) is not None:
            return False

        self.db.add(DeviceFingerprint(fingerprint=fingerprint, has_voted=True, last_vote_at=now))
        try:
            self.db.flush()
        except IntegrityError:
            # 동시 요청이 먼저 지문을 등록함
            raise DuplicateVoteError(fingerprint)
        return True

    def _ensure_milestone_row(self, player_id: int) -> None:
        """알림 구간 행이 없으면 생성 (직접 삽입된 선수 등)"""
        exists = self.db.query(PlayerMilestone.player_id)\
            .filter(PlayerMilestone.player_id == player_id)\
            .first()
        if exists:
            return

        self.db.add(PlayerMilestone(player_id=player_id, highest_notified=0))
        try:
            self.db.commit()
        except IntegrityError:
            # 동시 요청이 먼저 생성함
            self.db.rollback()

    def _advance_milestone(self, player_id: int, vote_count: int, milestones: tuple) -> List[int]:
        """득표수가 새로 넘은 알림 구간 반환 (선수별 1회)"""
        reached = sorted(m for m in milestones if m <= vote_count)
        if not reached:
            return []

        top = reached[-1]
        row = self.db.query(PlayerMilestone)\
            .filter(PlayerMilestone.player_id == player_id)\
            .first()
        previous = (row.highest_notified or 0) if row else 0
        if top <= previous:
            return []

        # 조건부 업데이트: 동시에 같은 구간을 넘어도 한 요청만 성공
        updated = self.db.query(PlayerMilestone)\
            .filter(
                PlayerMilestone.player_id == player_id,
                PlayerMilestone.highest_notified < top
            )\
            .update({"highest_notified": top}, synchronize_session=False)
        if not updated:
            return []

        return [m for m in reached if m > previous]

    def reset_votes(self) -> None:
        """모든 투표 + 기기 지문 삭제, 알림 구간 초기화"""
        try:
            deleted = self.db.query(Vote).delete(synchronize_session=False)
            self.db.query(DeviceFingerprint).delete(synchronize_session=False)
            self.db.query(PlayerMilestone).update({"highest_notified": 0}, synchronize_session=False)
            self.db.commit()
        except Exception:
            self.db.rollback()
            raise
        logger.info(f"투표 초기화: {deleted}건 삭제")

class DisabledVoteStore:
    """
    DB 미설정 시 저장소 (STORAGE_OPTIONAL 모드)
    모든 작업은 빈 결과를 반환하고 쓰기는 버려진다
    """

    def _warn(self, operation: str) -> None:
        logger.warning(f"[Database] 저장소 비활성화: {operation} 무시")

    def list_active_players(self) -> list:
        return []

    def get_player(self, player_id: int) -> None:
        return None

    def create_player(self, data: dict) -> None:
        self._warn("create_player")
        return None

    def set_player_active(self, player_id: int, is_active: bool) -> None:
        self._warn("set_player_active")
        return None

    def delete_all_players(self) -> None:
        self._warn("delete_all_players")

    def list_votes_for_player(self, player_id: int) -> list:
        return []

    def count_votes_for_player(self, player_id: int) -> int:
        return 0

    def count_total_votes(self) -> int:
        return 0

    def has_device_voted(self, fingerprint: str) -> bool:
        return False

    def get_players_with_vote_counts(self) -> list:
        return []

    def record_vote(self, player_id, fingerprint, ip_address=None, user_agent=None, milestones=()) -> None:
        self._warn("record_vote")
        return None

    def reset_votes(self) -> None:
        self._warn("reset_votes")
