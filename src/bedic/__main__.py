from __future__ import annotations
import argparse, json, os, sys
from typing import List

from . import Engine, __version__
from . import config as CFG
from .errors import DictionaryLoadError
from .models import AddResult, Record
from .search import is_searchable
from .selection import SelectionTracker

def _supports_color() -> bool:
    return sys.stdout.isatty() and os.environ.get("NO_COLOR", "") == ""

CSI = "\033["
def _c(text: str, code: str) -> str:
    if not _supports_color(): return text
    return f"{CSI}{code}m{text}{CSI}0m"

def _print_rows(rows: List[Record], exact: bool = False) -> None:
    if not rows:
        print(_c("(no matches)", "2;37")); return
    for i, r in enumerate(rows, 1):
        mark = "*" if exact and i == 1 else " "
        print(f"{i:<3}{mark} {r.headword}")

def _pick(rows: List[Record], arg: str) -> Record | None:
    try:
        n = int(arg)
    except ValueError:
        return None
    return rows[n - 1] if 1 <= n <= len(rows) else None

def build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(prog="bedic", description="Bulgarian-English two-way dictionary")
    p.add_argument("--a", dest="source_a", default=str(CFG.SOURCE_A), help="English->Bulgarian source")
    p.add_argument("--b", dest="source_b", default=str(CFG.SOURCE_B), help="Bulgarian->English source")
    p.add_argument("-H", "--history", default=str(CFG.HISTORY_FILE), metavar="FILE",
                   help="History file for reading. Default file is ~/new_words.txt")
    p.add_argument("-n", "--noread", action="store_true",
                   help="Prevents from reading the history file on startup")
    p.add_argument("--q", default=None, help="Single query to run once")
    p.add_argument("--repl", action="store_true", help="Interactive loop after init")
    p.add_argument("--json", action="store_true", help="Emit JSON for --q")
    p.add_argument("--verbose", action="store_true")
    p.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    return p

def main(argv: list[str] | None = None) -> int:
    args = build_parser().parse_args(argv)

    eng = Engine()
    try:
        eng.build(args.source_a, args.source_b, history_path=args.history,
                  read_history=not args.noread, verbose=args.verbose)
    except DictionaryLoadError as exc:
        print(f"bedic: {exc}", file=sys.stderr)
        return 1

    try:
        if args.q is not None:
            exact, rows = eng.search(args.q)
            if args.json:
                print(json.dumps({
                    "exact": exact,
                    "matches": [{"headword": r.headword, "translation": r.translation} for r in rows],
                }, ensure_ascii=False, indent=2))
            else:
                _print_rows(rows, exact)

        if args.repl:
            _repl(eng)
        return 0
    finally:
        eng.shutdown()

def _repl(eng: Engine) -> None:
    tracker = SelectionTracker(eng.history_index)
    rows: List[Record] = []
    print("Type a word (empty line to exit).")
    print(_c("Commands: :show N, :add N, :history, :export FILE", "2;37"))
    while True:
        try:
            raw = input("> ").strip()
        except (EOFError, KeyboardInterrupt):
            print(); break
        if not raw:
            break

        cmd, _, arg = raw.partition(" ")
        if cmd == ":history":
            rows = eng.history()
            tracker.on_results(rows, history_mode=True)
            _print_rows(rows)
            continue
        if cmd == ":export" and arg.strip():
            n = eng.export_history(arg.strip())
            print(_c(f"(exported {n} entries)", "2;36"))
            continue
        if cmd in (":show", ":add"):
            rec = _pick(rows, arg.strip())
            if rec is None:
                print(_c("(no such row)", "2;31")); continue
            sel = tracker.on_selected(rec.headword)
            if sel is None:
                continue
            if cmd == ":show":
                print(sel.translation)
            elif not sel.can_add:
                print(_c("(already in history)", "2;36"))
            elif eng.add_to_history(sel.headword, sel.translation) is AddResult.ADDED:
                print(_c(f"(added {sel.headword})", "2;36"))
            continue

        if not is_searchable(raw):
            print(_c(f"(query must be 1-{CFG.MAX_QUERY_LEN} characters)", "2;31")); continue
        result = eng.search(raw)
        rows = result.matches
        tracker.on_results(result)
        _print_rows(rows, result.exact_match)

if __name__ == "__main__":
    sys.exit(main())
