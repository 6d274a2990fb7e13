from typing import Any, Dict, List, Optional
from sqlmodel import Session, select, col

from domain.models.song import Song

class SongRepository:
    def __init__(self, session: Session):
        self.session = session

    def get_by_id(self, song_id: int) -> Optional[Song]:
        return self.session.get(Song, song_id)

    def find_all(
        self,
        group: Optional[str] = None,
        song: Optional[str] = None,
        release_date: Optional[str] = None,
        text: Optional[str] = None,
        link: Optional[str] = None,
        offset: int = 0,
        limit: int = 10
    ) -> List[Song]:
        """
        空でないフィルタのみを AND で適用する。
        text は部分一致、それ以外は完全一致。並び順は保証しない。
        """
        query = select(Song)
        if group: query = query.where(Song.group == group)
        if song: query = query.where(Song.song == song)
        if release_date: query = query.where(Song.release_date == release_date)
        if text: query = query.where(col(Song.text).like(f"%{text}%"))
        if link: query = query.where(Song.link == link)

        query = query.offset(offset).limit(limit)
        return self.session.exec(query).all()

    def create(self, song: Song) -> Song:
        self.session.add(song)
        self.session.commit()
        self.session.refresh(song)
        return song

    def update_by_id(self, song_id: int, fields: Dict[str, Any]) -> int:
        """部分更新。戻り値は影響行数 (0 or 1)"""
        db_song = self.get_by_id(song_id)
        if not db_song:
            return 0

        for key, value in fields.items():
            setattr(db_song, key, value)

        self.session.add(db_song)
        self.session.commit()
        return 1

    def delete_by_id(self, song_id: int) -> int:
        db_song = self.get_by_id(song_id)
        if not db_song:
            return 0

        self.session.delete(db_song)
        self.session.commit()
        return 1
