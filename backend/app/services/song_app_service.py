from typing import List, Optional
from sqlmodel import Session
from sqlalchemy.exc import SQLAlchemyError

from domain.models.song import Song
from domain.exceptions import SongNotFoundError, SongStoreError
from domain.services.pagination import page_offset, text_window
from infra.repositories.song_repository import SongRepository
from api.schemas.song import SongCreate, SongUpdate
from utils.song_info import fetch_song_detail
from utils.logger import get_logger

logger = get_logger(__name__)

class SongAppService:
    def __init__(self, session: Session):
        self.session = session
        self.repository = SongRepository(session)

    def _store_failed(self, message: str, error: Exception) -> SongStoreError:
        self.session.rollback()
        logger.error(f"{message}: {error}")
        return SongStoreError(message)

    def get_songs(
        self,
        page: int,
        limit: int,
        group: Optional[str] = None,
        song: Optional[str] = None,
        release_date: Optional[str] = None,
        text: Optional[str] = None,
        link: Optional[str] = None
    ) -> List[Song]:
        try:
            songs = self.repository.find_all(
                group=group,
                song=song,
                release_date=release_date,
                text=text,
                link=link,
                offset=page_offset(page, limit),
                limit=limit
            )
        except SQLAlchemyError as e:
            raise self._store_failed("Failed to fetch songs", e) from e

        # 空の一覧は 404 として扱う (既存クライアントとの互換)
        if not songs:
            raise SongNotFoundError("No songs found")
        return songs

    async def add_song(self, payload: SongCreate) -> Song:
        """
        外部 song info で補完してから保存する。
        補完に失敗した場合は何も書き込まずに SongInfoError を送出する。
        """
        detail = await fetch_song_detail(payload.group, payload.song)

        # クライアント指定の id / releaseDate / text / link は破棄
        new_song = Song(
            group=payload.group,
            song=payload.song,
            release_date=detail.release_date,
            text=detail.text,
            link=detail.link
        )
        try:
            return self.repository.create(new_song)
        except SQLAlchemyError as e:
            raise self._store_failed("Failed to create song in database", e) from e

    def update_song(self, song_id: int, patch: SongUpdate) -> SongUpdate:
        try:
            affected = self.repository.update_by_id(song_id, patch.patch_fields())
        except SQLAlchemyError as e:
            raise self._store_failed("Failed to update song", e) from e

        if affected == 0:
            raise SongNotFoundError("Song not found")
        # 更新後の行ではなく、送信されたパッチをそのまま返す
        return patch

    def delete_song(self, song_id: int) -> None:
        try:
            affected = self.repository.delete_by_id(song_id)
        except SQLAlchemyError as e:
            raise self._store_failed("Failed to delete song", e) from e

        if affected == 0:
            raise SongNotFoundError("Song not found")

    def get_song_text(self, song_id: int, page: int, limit: int) -> str:
        try:
            song = self.repository.get_by_id(song_id)
        except SQLAlchemyError as e:
            raise self._store_failed("Error fetching song text", e) from e

        if not song:
            raise SongNotFoundError("Song not found")
        return text_window(song.text or "", page, limit)
