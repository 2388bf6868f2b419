# app/api/routes/admin.py
from fastapi import APIRouter, Depends

from app.api.deps import AdminRoute, get_vote_store, get_current_admin
from app.models.user import User
from app.schemas.player import PlayerCreate, PlayerActiveUpdate, PlayerResponse
from app.schemas.vote import ActionResponse, VoteResponse
from app.services import voting_service

router = APIRouter(prefix="/api/v1/admin", tags=["관리자"], route_class=AdminRoute)

@router.post("/votes/reset", response_model=ActionResponse)
def reset_votes(
    admin: User = Depends(get_current_admin),
    store=Depends(get_vote_store)
):
    """모든 투표 초기화"""
    return voting_service.reset_votes(store, admin)

@router.post("/players", response_model=ActionResponse)
def add_player(
    data: PlayerCreate,
    admin: User = Depends(get_current_admin),
    store=Depends(get_vote_store)
):
    """선수 추가"""
    return voting_service.add_player(store, admin, data.model_dump())

@router.delete("/players", response_model=ActionResponse)
def delete_all_players(
    admin: User = Depends(get_current_admin),
    store=Depends(get_vote_store)
):
    """모든 선수 삭제"""
    return voting_service.delete_all_players(store, admin)

@router.patch("/players/{player_id}", response_model=PlayerResponse)
def update_player_active(
    player_id: int,
    data: PlayerActiveUpdate,
    admin: User = Depends(get_current_admin),
    store=Depends(get_vote_store)
):
    """선수 활성/비활성 전환"""
    return voting_service.set_player_active(store, admin, player_id, data.is_active)

@router.get("/players/{player_id}/votes", response_model=list[VoteResponse])
def get_player_votes(
    player_id: int,
    admin: User = Depends(get_current_admin),
    store=Depends(get_vote_store)
):
    """선수별 투표 기록"""
    return voting_service.list_player_votes(store, player_id)

@router.post("/notifications/summary", response_model=ActionResponse)
def send_results_summary(
    admin: User = Depends(get_current_admin),
    store=Depends(get_vote_store)
):
    """결과 요약 알림 전송"""
    return voting_service.send_results_summary(store)
