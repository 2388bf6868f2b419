# app/services/voting_service.py
import math
from typing import List

from app.core.exceptions import (
    ConflictError,
    DuplicateVoteError,
    InternalError,
    NotFoundError,
    VotingAppError,
)
from app.core.logger import audit_logger, logger
from app.models.player import Player
from app.models.user import User
from app.services import notification_service

# 득표 알림 구간
VOTE_MILESTONES = (10, 25, 50, 100)

def compute_percentage(vote_count: int, total_votes: int) -> int:
    """득표율 (반올림, 0.5는 올림)"""
    if total_votes <= 0:
        return 0
    return math.floor(vote_count * 100 / total_votes + 0.5)

def list_players(store) -> List[Player]:
    """활성 선수 목록"""
    return store.list_active_players()

def get_results(store) -> dict:
    """투표 결과 (득표순 + 비율)"""
    rows = store.get_players_with_vote_counts()
    total_votes = store.count_total_votes()

    players = []
    for row in rows:
        player = row["player"]
        vote_count = int(row["vote_count"])
        players.append({
            "id": player.id,
            "name": player.name,
            "team": player.team,
            "image_url": player.image_url,
            "position": player.position,
            "number": player.number,
            "is_active": player.is_active,
            "created_at": player.created_at,
            "updated_at": player.updated_at,
            "vote_count": vote_count,
            "percentage": compute_percentage(vote_count, total_votes)
        })

    # 저장소 정렬과 무관하게 항상 득표순
    players.sort(key=lambda p: (-p["vote_count"], p["id"]))

    return {
        "players": players,
        "total_votes": total_votes
    }

def check_voted(store, fingerprint: str) -> dict:
    """기기 투표 여부"""
    return {"has_voted": store.has_device_voted(fingerprint)}

def cast_vote(
    store,
    player_id: int,
    fingerprint: str,
    ip_address: str | None = None,
    user_agent: str | None = None
) -> dict:
    """
    투표하기
    1. 이미 투표한 기기 → ConflictError
    2. 활성 선수가 아니면 → NotFoundError
    3. 투표 기록 → 알림 (새 투표 + 구간 도달)
    """
    try:
        # 중복 투표 체크
        if store.has_device_voted(fingerprint):
            logger.info(f"중복 투표 시도: {fingerprint[:12]}")
            raise ConflictError()

        # 선수 확인
        players = store.list_active_players()
        player = next((p for p in players if p.id == player_id), None)
        if player is None:
            raise NotFoundError()

        # 투표 저장 (지문 유니크 제약으로 동시 요청도 차단)
        try:
            recorded = store.record_vote(
                player_id,
                fingerprint,
                ip_address=ip_address,
                user_agent=user_agent,
                milestones=VOTE_MILESTONES
            )
        except DuplicateVoteError:
            logger.info(f"동시 중복 투표 차단: {fingerprint[:12]}")
            raise ConflictError()

        if recorded is None:
            raise InternalError("투표를 저장할 수 없습니다 (저장소 비활성화)")

        audit_logger.info(f"투표 완료: {player.name} → {recorded.vote_count}표")

    except VotingAppError:
        raise
    except Exception as e:
        logger.exception(f"투표 처리 실패: {e}")
        raise InternalError("투표 처리 중 오류가 발생했습니다")

    # 알림 (실패해도 투표는 성공)
    notification_service.notify_new_vote(player.name, player.team, recorded.vote_count)
    for threshold in recorded.new_milestones:
        notification_service.notify_vote_threshold(threshold, player.name, recorded.vote_count)

    return {
        "success": True,
        "message": "투표가 완료되었습니다!"
    }

# ===== 관리자 =====

def reset_votes(store, admin: User) -> dict:
    """모든 투표 초기화"""
    try:
        store.reset_votes()
    except Exception as e:
        logger.exception(f"투표 초기화 실패: {e}")
        raise InternalError("투표 초기화 중 오류가 발생했습니다")

    audit_logger.warning(f"관리자 {admin.open_id}: 모든 투표 초기화")
    return {
        "success": True,
        "message": "모든 투표가 초기화되었습니다"
    }

def add_player(store, admin: User, data: dict) -> dict:
    """선수 추가"""
    try:
        player = store.create_player(data)
    except Exception as e:
        logger.exception(f"선수 추가 실패: {e}")
        raise InternalError("선수 추가 중 오류가 발생했습니다")

    if player is None:
        raise InternalError("선수를 저장할 수 없습니다 (저장소 비활성화)")

    audit_logger.info(f"관리자 {admin.open_id}: 선수 추가 {player.name} ({player.team})")
    return {
        "success": True,
        "message": "선수가 추가되었습니다"
    }

def delete_all_players(store, admin: User) -> dict:
    """모든 선수 삭제"""
    try:
        store.delete_all_players()
    except Exception as e:
        logger.exception(f"선수 삭제 실패: {e}")
        raise InternalError("선수 삭제 중 오류가 발생했습니다")

    audit_logger.warning(f"관리자 {admin.open_id}: 모든 선수 삭제")
    return {
        "success": True,
        "message": "모든 선수가 삭제되었습니다"
    }

def set_player_active(store, admin: User, player_id: int, is_active: bool) -> Player:
    """선수 활성/비활성 전환"""
    try:
        player = store.set_player_active(player_id, is_active)
    except Exception as e:
        logger.exception(f"선수 상태 변경 실패: {e}")
        raise InternalError("선수 상태 변경 중 오류가 발생했습니다")

    if player is None:
        raise NotFoundError()

    audit_logger.info(f"관리자 {admin.open_id}: {player.name} is_active={is_active}")
    return player

def list_player_votes(store, player_id: int) -> list:
    """선수별 투표 기록"""
    if store.get_player(player_id) is None:
        raise NotFoundError()
    return store.list_votes_for_player(player_id)

def send_results_summary(store) -> dict:
    """현재 결과 요약 알림 전송"""
    results = get_results(store)
    players = results["players"]
    top_player = players[0]["name"] if players else "-"

    sent = notification_service.notify_results_summary(
        top_player, results["total_votes"], len(players)
    )
    return {
        "success": sent,
        "message": "요약 알림을 보냈습니다" if sent else "요약 알림 전송에 실패했습니다"
    }
