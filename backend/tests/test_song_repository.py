from sqlmodel import Session
from domain.models.song import Song
from infra.repositories.song_repository import SongRepository

def test_create_assigns_id(session: Session):
    repo = SongRepository(session)
    first = repo.create(Song(group="Muse", song="Uprising"))
    second = repo.create(Song(group="Muse", song="Resistance"))

    assert first.id is not None and first.id > 0
    assert second.id != first.id

def test_find_all_filters_are_anded(session: Session):
    repo = SongRepository(session)
    repo.create(Song(group="Muse", song="Uprising", link="http://a"))
    repo.create(Song(group="Muse", song="Resistance", link="http://b"))
    repo.create(Song(group="Queen", song="Uprising", link="http://c"))

    assert len(repo.find_all()) == 3
    assert len(repo.find_all(group="Muse")) == 2
    assert len(repo.find_all(song="Uprising")) == 2
    result = repo.find_all(group="Muse", song="Uprising")
    assert [s.link for s in result] == ["http://a"]
    assert repo.find_all(group="Muse", link="http://c") == []

def test_find_all_offset_limit(session: Session):
    repo = SongRepository(session)
    for i in range(5):
        repo.create(Song(group="G", song=f"S{i}"))

    assert len(repo.find_all(offset=0, limit=3)) == 3
    assert len(repo.find_all(offset=3, limit=3)) == 2
    assert repo.find_all(offset=5, limit=3) == []

def test_find_all_text_substring(session: Session):
    repo = SongRepository(session)
    repo.create(Song(group="G", song="S1", text="first verse\n\nchorus"))
    repo.create(Song(group="G", song="S2", text="nothing here"))

    result = repo.find_all(text="chorus")
    assert [s.song for s in result] == ["S1"]

def test_update_by_id(session: Session):
    repo = SongRepository(session)
    song = repo.create(Song(group="Muse", song="Uprising", text="lyrics"))

    assert repo.update_by_id(song.id, {"group": "X"}) == 1
    updated = repo.get_by_id(song.id)
    assert updated.group == "X"
    assert updated.song == "Uprising"
    assert updated.text == "lyrics"

    assert repo.update_by_id(song.id + 100, {"group": "Y"}) == 0

def test_delete_by_id(session: Session):
    repo = SongRepository(session)
    song = repo.create(Song(group="Muse", song="Uprising"))
    song_id = song.id

    assert repo.delete_by_id(song_id) == 1
    assert repo.get_by_id(song_id) is None
    assert repo.delete_by_id(song_id) == 0

def test_song_model_docstring():
    assert Song.__doc__ and "楽曲モデル" in Song.__doc__
    assert Song.__tablename__ == "songs"
