# app/api/routes/voting.py
from fastapi import APIRouter, Depends, Request, Query

from app.api.deps import get_vote_store
from app.core.fingerprint import get_client_ip, fingerprint_from_request
from app.schemas.player import PlayerResponse, ResultsResponse
from app.schemas.vote import VoteCreate, CheckVotedResponse, FingerprintResponse, ActionResponse
from app.services import voting_service

router = APIRouter(prefix="/api/v1/voting", tags=["투표"])

@router.get("/players", response_model=list[PlayerResponse])
def get_players(store=Depends(get_vote_store)):
    """활성 선수 목록"""
    return voting_service.list_players(store)

@router.get("/results", response_model=ResultsResponse)
def get_results(store=Depends(get_vote_store)):
    """실시간 투표 결과"""
    return voting_service.get_results(store)

@router.get("/check", response_model=CheckVotedResponse)
def check_if_voted(
    fingerprint: str = Query(..., min_length=1, max_length=255),
    store=Depends(get_vote_store)
):
    """기기 투표 여부 확인"""
    return voting_service.check_voted(store, fingerprint)

@router.get("/fingerprint", response_model=FingerprintResponse)
def get_fingerprint(request: Request):
    """요청 정보(user agent + IP)로 만든 기기 지문"""
    return {"fingerprint": fingerprint_from_request(request)}

@router.post("/vote", response_model=ActionResponse)
def vote(
    data: VoteCreate,
    request: Request,
    store=Depends(get_vote_store)
):
    """투표하기 (기기당 1표)"""
    return voting_service.cast_vote(
        store,
        player_id=data.player_id,
        fingerprint=data.fingerprint,
        ip_address=get_client_ip(request),
        user_agent=request.headers.get("user-agent")
    )
