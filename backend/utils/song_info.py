import asyncio
import aiohttp
from typing import List, Optional
from pydantic import BaseModel, ConfigDict, Field, ValidationError

from config import settings
from domain.exceptions import SongInfoError
from utils.logger import get_logger

logger = get_logger(__name__)

VERSE_SEPARATOR = "\n\n"

class SongDetail(BaseModel):
    """song info サービスのレスポンス {releaseDate, text, link}"""
    model_config = ConfigDict(populate_by_name=True)

    release_date: str = Field(default="", alias="releaseDate")
    text: str = ""
    link: str = ""

def split_verses(text: str) -> List[str]:
    """Split lyrics into paragraph blocks separated by a blank line."""
    return text.split(VERSE_SEPARATOR)

def join_verses(verses: List[str]) -> str:
    return VERSE_SEPARATOR.join(verses)

async def fetch_song_detail(group: str, song: str, base_url: Optional[str] = None) -> SongDetail:
    """
    Fetch release date, lyrics and link from the song info service.
    Single attempt: raises SongInfoError on transport failure, non-200 status
    or an undecodable body.
    """
    url = base_url or settings.SONG_INFO_URL
    params = {"group": group, "song": song}

    try:
        async with aiohttp.ClientSession() as session:
            async with session.get(url, params=params) as response:
                if response.status != 200:
                    logger.error(f"Song info API returned status {response.status} for: {group} - {song}")
                    raise SongInfoError(f"song info service returned status {response.status}")

                # content-type に依存せず JSON として解釈する
                payload = await response.json(content_type=None)
    except aiohttp.ClientError as e:
        logger.error(f"Failed to fetch song info ({group} - {song}): {e}")
        raise SongInfoError(f"song info request failed: {e}") from e
    except asyncio.TimeoutError as e:
        logger.error(f"Song info request timed out ({group} - {song})")
        raise SongInfoError("song info request timed out") from e
    except ValueError as e:
        logger.error(f"Failed to decode song info ({group} - {song}): {e}")
        raise SongInfoError(f"song info response is not valid JSON: {e}") from e

    try:
        detail = SongDetail.model_validate(payload)
    except ValidationError as e:
        logger.error(f"Unexpected song info payload ({group} - {song}): {e}")
        raise SongInfoError("song info response has an unexpected shape") from e

    # 段落区切り (空行) を正規化
    detail.text = join_verses(split_verses(detail.text))
    return detail
