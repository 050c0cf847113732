from bubblegum.storage import HighScoreStore, default_store_path


def test_empty_store_reads_zero(tmp_path):
    store = HighScoreStore(tmp_path / "scores.json")
    assert store.high_score() == 0


def test_submit_higher_score_persists(tmp_path):
    path = tmp_path / "nested" / "scores.json"
    store = HighScoreStore(path)
    assert store.submit(250) is True
    assert store.high_score() == 250
    assert HighScoreStore(path).high_score() == 250


def test_lower_score_is_ignored(tmp_path):
    store = HighScoreStore(tmp_path / "scores.json")
    store.submit(300)
    assert store.submit(120) is False
    assert store.submit(300) is False
    assert store.high_score() == 300


def test_corrupt_file_reads_zero(tmp_path):
    path = tmp_path / "scores.json"
    path.write_text("not json", encoding="utf-8")
    store = HighScoreStore(path)
    assert store.high_score() == 0
    assert store.submit(10) is True
    assert store.high_score() == 10


def test_default_path_uses_data_home(tmp_path, monkeypatch):
    monkeypatch.setenv("XDG_DATA_HOME", str(tmp_path))
    path = default_store_path()
    assert path.parent.parent == tmp_path
    assert HighScoreStore().path == path