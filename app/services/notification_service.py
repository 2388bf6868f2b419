# app/services/notification_service.py
import httpx

from app.config import settings
from app.core.logger import logger

def notify_owner(title: str, content: str) -> bool:
    """
    운영자 알림 전송
    - 실패해도 예외를 올리지 않음 (로그만 남김)
    - 재시도 없음
    """
    if not settings.notification_url:
        logger.debug(f"알림 채널 미설정, 건너뜀: {title}")
        return False

    headers = {}
    if settings.notification_api_key:
        headers["Authorization"] = f"Bearer {settings.notification_api_key}"

    try:
        response = httpx.post(
            settings.notification_url,
            json={"title": title, "content": content},
            headers=headers,
            timeout=settings.notification_timeout_seconds
        )
        response.raise_for_status()
        return True
    except httpx.HTTPError as e:
        logger.error(f"알림 전송 실패: {e}")
        return False

def notify_new_vote(player_name: str, player_team: str, vote_count: int) -> bool:
    """새 투표 알림"""
    try:
        return notify_owner(
            title="🏀 새 투표 등록",
            content=f"{player_name} ({player_team}) 선수가 투표를 받았습니다. 총 {vote_count}표"
        )
    except Exception as e:
        logger.error(f"알림 전송 중 오류: {e}")
        return False

def notify_vote_threshold(threshold: int, player_name: str, vote_count: int) -> bool:
    """득표 구간 도달 알림"""
    try:
        return notify_owner(
            title=f"🎯 {threshold}표 달성!",
            content=f"{player_name} 선수가 {vote_count}표를 받았습니다!"
        )
    except Exception as e:
        logger.error(f"알림 전송 중 오류: {e}")
        return False

def notify_results_summary(top_player: str, total_votes: int, player_count: int) -> bool:
    """투표 결과 요약 알림"""
    try:
        return notify_owner(
            title="📊 HOOPERS VIBES 투표 요약",
            content=f"1위: {top_player} | 총 {total_votes}표 | 선수 {player_count}명"
        )
    except Exception as e:
        logger.error(f"알림 전송 중 오류: {e}")
        return False
