from __future__ import annotations
import argparse
import sys
from flask import Flask, request, jsonify
from bedic import Engine
from bedic import config as CFG
from bedic.errors import DictionaryLoadError
from bedic.models import AddResult, Record
from bedic.search import is_searchable

app = Flask(__name__)
_engine: Engine | None = None


def _row(r: Record) -> dict:
    return {"headword": r.headword, "translation": r.translation}

# ---------- API ----------
@app.get("/api/search")
def api_search():
    q = request.args.get("q", "", type=str)
    if not is_searchable(q):
        return jsonify({"exact": False, "matches": []})
    exact, rows = _engine.search(q)  # type: ignore
    return jsonify({"exact": exact, "matches": [_row(r) for r in rows]})

@app.get("/api/history")
def api_history():
    reverse = request.args.get("reverse", 1, type=int)
    rows = _engine.history(reverse=bool(reverse))  # type: ignore
    return jsonify([_row(r) for r in rows])

@app.post("/api/history")
def api_history_add():
    data = request.get_json(silent=True) or {}
    word = data.get("headword")
    translation = data.get("translation")
    if not isinstance(word, str) or not word or not isinstance(translation, str):
        return jsonify({"error": "headword and translation are required"}), 400
    if _engine.add_to_history(word, translation) is AddResult.DUPLICATE:  # type: ignore
        return jsonify({"added": False, "reason": "duplicate"}), 409
    return jsonify({"added": True}), 201

@app.get("/api/history/<path:word>")
def api_history_get(word: str):
    rec = _engine.history_index.lookup(word)  # type: ignore
    if rec is None:
        return jsonify({"error": "not found"}), 404
    return jsonify(_row(rec))

@app.get("/health")
def health():
    ready = _engine is not None and _engine.store is not None
    return jsonify({"ok": ready, "entries": len(_engine.store) if ready else 0})  # type: ignore

def main(argv=None) -> int:
    ap = argparse.ArgumentParser(description="Run the dictionary JSON API on top of Engine")
    ap.add_argument("--a", dest="source_a", default=str(CFG.SOURCE_A))
    ap.add_argument("--b", dest="source_b", default=str(CFG.SOURCE_B))
    ap.add_argument("-H", "--history", default=str(CFG.HISTORY_FILE))
    ap.add_argument("-n", "--noread", action="store_true")
    ap.add_argument("--host", default="127.0.0.1")
    ap.add_argument("--port", type=int, default=8000)
    ap.add_argument("--verbose", action="store_true")
    args = ap.parse_args(argv)

    global _engine
    _engine = Engine()
    try:
        _engine.build(args.source_a, args.source_b, history_path=args.history,
                      read_history=not args.noread, verbose=args.verbose)
    except DictionaryLoadError as exc:
        print(f"bedic_web: {exc}", file=sys.stderr)
        return 1

    try:
        app.run(host=args.host, port=args.port, debug=args.verbose)
    finally:
        _engine.shutdown()
    return 0

if __name__ == "__main__":
    raise SystemExit(main())
