# Shared sample data for the e2e tests.
from bedic.models import Record

EN_BG = (
    "CAT\nкотка\n^;"
    "CAR\nкола, автомобил\n^;"
    "CARD\nкарта\n^;"
    "HOUSE\nкъща\n"
)

BG_EN = (
    "КОТКА\ncat\n^;"
    "КЪЩА\nhouse\n^;"
    "КОЛА\ncar\n"
)


def records(*words: str) -> list[Record]:
    return sorted(Record(w, f"{w}\ntranslation of {w}") for w in words)
