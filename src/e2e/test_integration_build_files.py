from pathlib import Path
import pytest

from bedic import Engine, AddResult, DictionaryLoadError
from bedic.config import HISTORY_DELIMITER


@pytest.mark.e2e
def test_build_from_files_and_search(sources):
    a, b = sources
    eng = Engine()
    try:
        eng.build(a, b)
        assert len(eng.store) == 7
        exact, rows = eng.search("ca")
        assert exact is False
        assert [r.headword for r in rows] == ["CAR", "CARD", "CAT"]
        assert rows[0].translation == "CAR\nкола, автомобил\n"
    finally:
        eng.shutdown()


@pytest.mark.e2e
def test_search_reaches_second_source(sources):
    a, b = sources
    eng = Engine().build(a, b)
    try:
        exact, rows = eng.search("ко")
        assert exact is False
        assert [r.headword for r in rows] == ["КОЛА", "КОТКА"]
        exact, rows = eng.search("къща")
        assert exact is True and rows[0].translation == "КЪЩА\nhouse\n"
    finally:
        eng.shutdown()


@pytest.mark.e2e
def test_missing_source_is_fatal(tmp_path: Path, sources):
    a, _ = sources
    with pytest.raises(DictionaryLoadError):
        Engine().build(a, str(tmp_path / "missing.dat"))


@pytest.mark.e2e
def test_history_is_appended_and_reloaded(tmp_path: Path, sources):
    a, b = sources
    hist = tmp_path / "words" / "new_words.txt"

    e1 = Engine().build(a, b, history_path=str(hist))
    exact, rows = e1.search("cat")
    assert exact
    assert not e1.contains("CAT")
    assert e1.add_to_history("CAT", rows[0].translation) is AddResult.ADDED
    assert e1.add_to_history("CAT", "other") is AddResult.DUPLICATE
    e1.add_to_history("HOUSE", "HOUSE\nкъща\n")
    e1.shutdown()

    assert hist.read_text(encoding="utf-8").startswith(HISTORY_DELIMITER + "\nCAT\n")

    e2 = Engine().build(a, b, history_path=str(hist))
    try:
        assert e2.contains("CAT") and e2.contains("HOUSE")
        assert [r.headword for r in e2.history()] == ["HOUSE", "CAT"]
        assert e2.history(reverse=False)[0].translation == "CAT\nкотка\n"
        assert e2.can_show_history()
    finally:
        e2.shutdown()


@pytest.mark.e2e
def test_noread_skips_history_file(tmp_path: Path, sources):
    a, b = sources
    hist = tmp_path / "new_words.txt"
    hist.write_text(f"{HISTORY_DELIMITER}\nCAT\nкотка\n", encoding="utf-8")
    eng = Engine().build(a, b, history_path=str(hist), read_history=False)
    try:
        assert not eng.contains("CAT")
        assert not eng.can_show_history()
    finally:
        eng.shutdown()


def test_engine_requires_build():
    with pytest.raises(RuntimeError):
        Engine().search("x")


def test_from_texts(texts):
    eng = Engine.from_texts(*texts)
    assert eng.search("house").exact_match
    assert eng.search("").matches[0].headword == "CAR"
