from typing import Optional
from sqlmodel import Field, SQLModel

class Song(SQLModel, table=True):
    """
    楽曲モデル
    release_date / text / link は作成時に外部 song info サービスの値で上書きされる
    """
    __tablename__ = "songs"
    id: Optional[int] = Field(default=None, primary_key=True)
    group: str
    song: str

    # エンリッチメント結果
    release_date: str = Field(default="")
    text: str = Field(default="")
    link: str = Field(default="")
