from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel
from typing import Any, Dict, Optional

class SongBase(BaseModel):
    # JSON は camelCase (releaseDate)、Python 側は snake_case
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

class SongCreate(SongBase):
    # id / releaseDate / text / link は受け付けるが保存時に破棄される
    id: Optional[int] = None
    group: str = Field(min_length=1)
    song: str = Field(min_length=1)
    release_date: Optional[str] = None
    text: Optional[str] = None
    link: Optional[str] = None

class SongUpdate(SongBase):
    id: Optional[int] = None
    group: Optional[str] = None
    song: Optional[str] = None
    release_date: Optional[str] = None
    text: Optional[str] = None
    link: Optional[str] = None

    def patch_fields(self) -> Dict[str, Any]:
        """空でないフィールドのみを返す (id は不変なので除外)"""
        data = self.model_dump(exclude={"id"})
        return {key: value for key, value in data.items() if value not in (None, "")}

class SongRead(SongBase):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True, from_attributes=True)

    id: int
    group: str
    song: str
    release_date: str = ""
    text: str = ""
    link: str = ""

class SongText(BaseModel):
    text: str

class Message(BaseModel):
    message: str
