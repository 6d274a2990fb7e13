import re
from fastapi import APIRouter, Depends, HTTPException, Query
from sqlmodel import Session
from typing import List, Optional
from infra.database.connection import get_session
from api.schemas.song import SongCreate, SongUpdate, SongRead, SongText, Message
from app.services.song_app_service import SongAppService
from domain.exceptions import SongInfoError, SongNotFoundError, SongStoreError
from domain.services.pagination import parse_page_params, parse_int64

router = APIRouter(tags=["songs"])

SONG_ID_PATTERN = re.compile(r"[+-]?[0-9]+")

def parse_song_id(raw_id: str) -> int:
    # 数字以外や 64bit に収まらない値は 400
    song_id = parse_int64(raw_id) if SONG_ID_PATTERN.fullmatch(raw_id) else None
    if song_id is None:
        raise HTTPException(status_code=400, detail="Invalid song ID")
    return song_id

@router.get("/songs", response_model=List[SongRead])
def get_songs(
    page: Optional[str] = Query(None, description="Page number"),
    limit: Optional[str] = Query(None, description="Limit number"),
    group: Optional[str] = Query(None, description="Group filter"),
    song: Optional[str] = Query(None, description="Song filter"),
    release_date: Optional[str] = Query(None, alias="releaseDate", description="Release date filter"),
    text: Optional[str] = Query(None, description="Text filter (substring)"),
    link: Optional[str] = Query(None, description="Link filter"),
    session: Session = Depends(get_session)
):
    """
    楽曲一覧を取得する。
    空でないフィルタのみを AND で適用し、該当なしは 404 を返す。
    """
    page_num, limit_num = parse_page_params(page, limit)
    service = SongAppService(session)
    try:
        return service.get_songs(
            page=page_num,
            limit=limit_num,
            group=group,
            song=song,
            release_date=release_date,
            text=text,
            link=link
        )
    except SongNotFoundError as e:
        raise HTTPException(status_code=404, detail=e.message)
    except SongStoreError:
        raise HTTPException(status_code=500, detail="Failed to fetch songs")

@router.post("/songs", response_model=SongRead, status_code=201)
async def add_song(payload: SongCreate, session: Session = Depends(get_session)):
    """外部 song info で releaseDate / text / link を補完して楽曲を登録する"""
    service = SongAppService(session)
    try:
        return await service.add_song(payload)
    except (SongInfoError, SongStoreError):
        raise HTTPException(status_code=500, detail="Failed to add song")

@router.put(
    "/songs/{song_id}",
    response_model=SongUpdate,
    response_model_exclude_unset=True
)
def update_song(song_id: str, patch: SongUpdate, session: Session = Depends(get_session)):
    song_id_num = parse_song_id(song_id)
    service = SongAppService(session)
    try:
        return service.update_song(song_id_num, patch)
    except SongNotFoundError as e:
        raise HTTPException(status_code=404, detail=e.message)
    except SongStoreError:
        raise HTTPException(status_code=500, detail="Failed to update song")

@router.delete("/songs/{song_id}", response_model=Message)
def delete_song(song_id: str, session: Session = Depends(get_session)):
    song_id_num = parse_song_id(song_id)
    service = SongAppService(session)
    try:
        service.delete_song(song_id_num)
    except SongNotFoundError as e:
        raise HTTPException(status_code=404, detail=e.message)
    except SongStoreError:
        raise HTTPException(status_code=500, detail="Failed to delete song")
    return {"message": "Song deleted"}

@router.get("/songs/{song_id}/text", response_model=SongText)
def get_song_text(
    song_id: str,
    page: Optional[str] = Query(None, description="Page number"),
    limit: Optional[str] = Query(None, description="Characters per page"),
    session: Session = Depends(get_session)
):
    """歌詞テキストを文字単位でページングして返す"""
    song_id_num = parse_song_id(song_id)
    page_num, limit_num = parse_page_params(page, limit)
    service = SongAppService(session)
    try:
        return {"text": service.get_song_text(song_id_num, page_num, limit_num)}
    except SongNotFoundError as e:
        raise HTTPException(status_code=404, detail=e.message)
    except SongStoreError:
        raise HTTPException(status_code=500, detail="Failed to fetch song")
