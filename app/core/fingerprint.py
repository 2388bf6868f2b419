# app/core/fingerprint.py
"""
기기 지문 생성

user agent + IP로 SHA-256 해시를 만들어 "기기 하나"를 근사한다.
같은 입력이면 항상 같은 지문이 나온다.
"""
import hashlib

# IP가 없을 때 사용하는 토큰 (빈 문자열 IP와 구분)
UNKNOWN_IP = "unknown"

def generate_device_fingerprint(user_agent: str, ip_address: str | None = None) -> str:
    """기기 지문 생성 (64자 소문자 hex)"""
    components = [
        user_agent,
        ip_address if ip_address is not None else UNKNOWN_IP,
    ]
    combined = "|".join(components)
    return hashlib.sha256(combined.encode("utf-8")).hexdigest()

def get_client_ip(request) -> str | None:
    """
    요청에서 클라이언트 IP 추출
    우선순위: x-forwarded-for(첫 번째) > x-client-ip > x-real-ip > 소켓 주소
    """
    headers = request.headers

    # 프록시 헤더 먼저 (체인의 첫 IP만 신뢰)
    forwarded = headers.get("x-forwarded-for")
    if forwarded:
        return forwarded.split(",")[0].strip()

    client_ip = headers.get("x-client-ip")
    if client_ip:
        return client_ip

    real_ip = headers.get("x-real-ip")
    if real_ip:
        return real_ip

    # 소켓 주소
    client = getattr(request, "client", None)
    if client is not None and getattr(client, "host", None):
        return client.host

    return None

def fingerprint_from_request(request) -> str:
    """요청의 user agent + IP로 지문 생성"""
    user_agent = request.headers.get("user-agent") or ""
    return generate_device_fingerprint(user_agent, get_client_ip(request))
