from pathlib import Path
import pytest

from dictdata import EN_BG, BG_EN


@pytest.fixture
def texts() -> tuple[str, str]:
    return EN_BG, BG_EN


@pytest.fixture
def sources(tmp_path: Path) -> tuple[str, str]:
    a = tmp_path / "en_bg-utf8.dat"
    b = tmp_path / "bg_en-utf8.dat"
    a.write_text(EN_BG, encoding="utf-8")
    b.write_text(BG_EN, encoding="utf-8")
    return str(a), str(b)
