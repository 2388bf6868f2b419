# app/core/logging_middleware.py
from fastapi import Request
from app.core.logger import logger
from app.core.fingerprint import get_client_ip
import time

async def log_requests(request: Request, call_next):
    """모든 요청/응답 로깅"""

    # 요청 시작 시간
    start_time = time.perf_counter()
    client_ip = get_client_ip(request) or "-"

    # 요청 정보 로깅
    logger.info(f"➡️  {request.method} {request.url.path} (ip: {client_ip})")

    # 요청 처리
    try:
        response = await call_next(request)
    except Exception as e:
        process_time = (time.perf_counter() - start_time) * 1000

        # 에러 로깅
        logger.exception(
            f"❌ {request.method} {request.url.path} "
            f"- Error: {e} "
            f"- Time: {process_time:.2f}ms"
        )
        raise

    # 응답 시간 계산
    process_time = (time.perf_counter() - start_time) * 1000  # ms

    # 응답 로깅
    log = logger.warning if response.status_code >= 400 else logger.info
    log(
        f"⬅️  {request.method} {request.url.path} "
        f"- Status: {response.status_code} "
        f"- Time: {process_time:.2f}ms"
    )

    return response
