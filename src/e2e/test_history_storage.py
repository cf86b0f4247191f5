from pathlib import Path

from bedic import Engine
from bedic.config import HISTORY_DELIMITER
from bedic.DB.storage import append_history, load_history, save_history
from bedic.models import Record


def test_missing_file_is_empty_history(tmp_path: Path):
    assert load_history(str(tmp_path / "none.txt")) == []


def test_append_then_load(tmp_path: Path):
    path = str(tmp_path / "new_words.txt")
    append_history(path, Record("CAT", "CAT\nкотка\n"))
    append_history(path, Record("DOG", "DOG\nкуче"))
    recs = load_history(path)
    assert [(r.headword, r.translation) for r in recs] == [
        ("CAT", "CAT\nкотка\n"),
        ("DOG", "DOG\nкуче"),
    ]


def test_save_rewrites_whole_file(tmp_path: Path):
    path = tmp_path / "h.txt"
    path.write_text("stale", encoding="utf-8")
    save_history(str(path), [Record("A", "A\n1"), Record("B", "B\n2")])
    assert path.read_text(encoding="utf-8") == (
        f"{HISTORY_DELIMITER}\nA\n1\n{HISTORY_DELIMITER}\nB\n2\n"
    )
    assert not (tmp_path / "h.txt.tmp").exists()


def test_engine_export_history(tmp_path: Path, texts):
    eng = Engine.from_texts(*texts)
    eng.add_to_history("HOUSE", "HOUSE\nкъща\n")
    eng.add_to_history("CAT", "CAT\nкотка\n")
    out = tmp_path / "export.txt"
    assert eng.export_history(str(out)) == 2
    assert [r.headword for r in load_history(str(out))] == ["HOUSE", "CAT"]


def test_translation_without_headword_line_survives_reload(tmp_path: Path):
    path = str(tmp_path / "h.txt")
    append_history(path, Record("CAT", "котка"))
    append_history(path, Record("DOG", "DOG\nкуче"))
    recs = load_history(path)
    assert [r.headword for r in recs] == ["CAT", "DOG"]
    assert recs[0].translation == "CAT\nкотка"
    assert recs[1].translation == "DOG\nкуче"


def test_engine_reload_keeps_one_line_entries(tmp_path: Path, sources):
    a, b = sources
    hist = str(tmp_path / "h.txt")
    e1 = Engine().build(a, b, history_path=hist)
    e1.add_to_history("CAT", "котка")
    e1.shutdown()

    e2 = Engine().build(a, b, history_path=hist)
    try:
        assert e2.contains("CAT")
    finally:
        e2.shutdown()


def test_failed_history_write_keeps_entry_in_memory(tmp_path: Path, texts, monkeypatch, caplog):
    import bedic.engine as engmod
    from bedic.models import AddResult

    def _fail(path, rec):
        raise OSError("disk full")

    monkeypatch.setattr(engmod, "append_history", _fail)
    eng = Engine.from_texts(*texts, history_path=str(tmp_path / "h.txt"))
    with caplog.at_level("ERROR", logger="bedic.engine"):
        assert eng.add_to_history("CAT", "CAT\nкотка\n") is AddResult.ADDED
    assert eng.contains("CAT")
    assert "disk full" in caplog.text
