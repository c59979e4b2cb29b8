"""Flask front end for two-keyword search over a built index.

Usage:
    python -m littlesearch.viewer.app --docs docs.txt --noise-words noisewords.txt
"""

import argparse
from pathlib import Path

from flask import Flask, jsonify, render_template_string, request

from littlesearch.etl.inputs import MissingInputFileError
from littlesearch.index.engine import SearchEngine

app = Flask(__name__)

_engine: SearchEngine | None = None


def set_engine(engine: SearchEngine) -> None:
    global _engine
    _engine = engine


INDEX_TEMPLATE = """<!DOCTYPE html>
<html>
<head><meta charset="utf-8"><title>Little Search</title></head>
<body>
<h1>Search</h1>
<form method="get" action="/">
  <input name="kw1" value="{{ kw1 }}"> or <input name="kw2" value="{{ kw2 }}">
  <button type="submit">Search</button>
</form>
{% if searched %}
  {% if results %}
  <ol>
  {% for doc_id in results %}
    <li>{{ doc_id }}</li>
  {% endfor %}
  </ol>
  {% else %}
  <p>No matching documents.</p>
  {% endif %}
{% endif %}
<p>{{ n_keywords }} keywords indexed.</p>
</body>
</html>
"""


def _search(word1: str, word2: str) -> tuple[str | None, str | None, list[str] | None]:
    assert _engine is not None
    kw1 = _engine.get_keyword(word1) if word1 else None
    kw2 = _engine.get_keyword(word2) if word2 else None
    return kw1, kw2, _engine.top5_search(kw1, kw2)


@app.get("/")
def index():
    assert _engine is not None
    word1 = request.args.get("kw1", "")
    word2 = request.args.get("kw2", "")
    searched = bool(word1 or word2)
    results = _search(word1, word2)[2] if searched else None
    return render_template_string(
        INDEX_TEMPLATE,
        kw1=word1,
        kw2=word2,
        searched=searched,
        results=results,
        n_keywords=len(_engine),
    )


@app.get("/api/search")
def search():
    word1 = request.args.get("kw1", "")
    word2 = request.args.get("kw2", "")
    if not word1 and not word2:
        return jsonify({"error": "kw1 or kw2 is required"}), 400
    kw1, kw2, results = _search(word1, word2)
    return jsonify({"kw1": kw1, "kw2": kw2, "results": results})


@app.get("/api/keywords/<word>")
def keyword(word: str):
    assert _engine is not None
    kw = _engine.get_keyword(word)
    occs = _engine.occurrences(kw)
    if not occs:
        return jsonify({"error": "not found"}), 404
    return jsonify({"keyword": kw, "occurrences": [o.model_dump() for o in occs]})


def main(argv: list[str] | None = None) -> None:
    parser = argparse.ArgumentParser(description="Little Search web viewer")
    parser.add_argument("--docs", default="docs.txt")
    parser.add_argument("--noise-words", default="noisewords.txt")
    parser.add_argument("--port", type=int, default=5004)
    args = parser.parse_args(argv)

    try:
        engine = SearchEngine.from_files(Path(args.docs), Path(args.noise_words))
    except MissingInputFileError as exc:
        parser.error(str(exc))
    set_engine(engine)
    print(f"Serving {len(engine)} keywords on http://127.0.0.1:{args.port}")
    app.run(host="127.0.0.1", port=args.port, debug=False)


if __name__ == "__main__":
    main()
