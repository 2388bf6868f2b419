# app/core/exceptions.py
from fastapi import status

class VotingAppError(Exception):
    """API 에러 (고정 코드 + 사용자 메시지)"""

    code = "INTERNAL_SERVER_ERROR"
    status_code = status.HTTP_500_INTERNAL_SERVER_ERROR
    default_message = "서버 오류가 발생했습니다"

    def __init__(self, message: str | None = None):
        self.message = message or self.default_message
        super().__init__(self.message)

class ConflictError(VotingAppError):
    """중복 투표"""
    code = "CONFLICT"
    status_code = status.HTTP_409_CONFLICT
    default_message = "이미 투표하셨습니다. 기기당 한 번만 투표할 수 있습니다"

class NotFoundError(VotingAppError):
    """선수 없음 (또는 비활성)"""
    code = "NOT_FOUND"
    status_code = status.HTTP_404_NOT_FOUND
    default_message = "선수를 찾을 수 없습니다"

class UnauthorizedError(VotingAppError):
    """토큰 없음 / 잘못된 토큰"""
    code = "UNAUTHORIZED"
    status_code = status.HTTP_401_UNAUTHORIZED
    default_message = "인증 정보가 올바르지 않습니다"

class ForbiddenError(VotingAppError):
    """관리자 전용 작업"""
    code = "FORBIDDEN"
    status_code = status.HTTP_403_FORBIDDEN
    default_message = "권한이 없습니다. 관리자만 사용할 수 있습니다"

class InternalError(VotingAppError):
    """저장소 오류 등 서버 내부 오류 (기본 코드/메시지 사용)"""

class DuplicateVoteError(Exception):
    """저장소 레벨: 이미 투표한 기기 지문 (유니크 제약 위반 포함)"""

    def __init__(self, fingerprint: str):
        self.fingerprint = fingerprint
        super().__init__(f"fingerprint already voted: {fingerprint[:12]}")
