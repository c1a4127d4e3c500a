from __future__ import annotations
import argparse
import logging
import os
from flask import Flask, Response, current_app, jsonify, request
from shakesearch import config as CFG
from shakesearch.engine import Engine
from shakesearch.errors import LoadError, ValidationError
from shakesearch.searcher import parse_offset

log = logging.getLogger(__name__)

_EXT = "shakesearch"


def create_app(engine: Engine) -> Flask:
    """Build the Flask app around an already-built engine."""
    app = Flask(__name__)
    app.extensions[_EXT] = engine

    # ---------- errors ----------
    @app.errorhandler(ValidationError)
    def bad_request(exc: ValidationError):
        return Response(str(exc), status=400, mimetype="text/plain")

    # ---------- API ----------
    @app.get("/search")
    def search():
        q = request.args.get("q", "", type=str)
        if not q:
            return Response("missing search query in URL params", status=400, mimetype="text/plain")
        rows = _engine().search(q)
        return jsonify([r.to_json() for r in rows])

    @app.get("/loadmore")
    def load_more():
        kind = request.args.get("type", "", type=str)
        if kind not in ("prev", "nxt"):
            return Response("missing search type in URL params", status=400, mimetype="text/plain")
        idx = request.args.get("idx", "", type=str)
        if not idx:
            return Response("missing search idx in URL params", status=400, mimetype="text/plain")
        try:
            ptr = parse_offset(idx)
        except ValidationError:
            return Response("idx should be integer", status=400, mimetype="text/plain")
        return jsonify(_engine().expand_context(ptr, kind))

    @app.get("/health")
    def health():
        stats = _engine().stats()
        return jsonify({"ok": True, "chars": stats["chars"], "source": stats["source"]})

    # ---------- UI ----------
    @app.get("/")
    def home():
        return Response(_HOME_HTML, mimetype="text/html")

    return app


def _engine() -> Engine:
    return current_app.extensions[_EXT]


_HOME_HTML = r"""
<!doctype html>
<html lang="en">
<head>
<meta charset="utf-8" />
<meta name="viewport" content="width=device-width,initial-scale=1" />
<title>ShakeSearch</title>
<style>
:root{
  --bg:#0b0f14;
  --panel:#0f141b;
  --ink:#cfd8e3;
  --muted:#8a94a6;
  --accent:#6ee7ff;
  --border:#1c2530;
  --mark-bg:rgba(110,231,255,.2);
}
*{box-sizing:border-box}
body{
  margin:0; background:var(--bg); color:var(--ink);
  font:16px/1.45 system-ui,-apple-system,Segoe UI,Roboto,Ubuntu,"Helvetica Neue",Arial;
}
.container{ max-width:980px; margin:24px auto; padding:0 16px; }
.card{ background:var(--panel); border:1px solid var(--border); border-radius:16px; padding:18px; }
h1{ font-size:20px; margin:0 0 8px 0; }
form{ display:flex; gap:12px; margin:12px 0 4px 0; }
form input{
  flex:1; padding:12px 14px; border-radius:12px; border:1px solid var(--border);
  background:#0b1117; color:var(--ink); font-size:16px; outline:none;
}
form input:focus{ border-color:var(--accent) }
button, .more{
  padding:6px 10px; border-radius:10px; border:1px solid var(--border);
  background:#0b1117; color:var(--ink); cursor:pointer;
}
#stats{ color:var(--muted); font-size:13px; margin-top:6px; }
#err{ display:none; margin-top:12px; color:#ffb0b0; }
.row{ padding:12px 14px; border-top:1px solid var(--border); white-space:pre-wrap; }
.row:first-child{ border-top:none }
mark{ background:var(--mark-bg); color:inherit; border-bottom:1px solid var(--accent) }
</style>
</head>
<body>
  <div class="container">
    <div class="card">
      <h1>ShakeSearch</h1>
      <form id="form">
        <input id="q" name="query" type="text" placeholder="Search the complete works…" autocomplete="off" autofocus />
        <button type="submit">Search</button>
      </form>
      <div id="stats">Ready.</div>
      <div id="err"></div>
      <div id="out"></div>
    </div>
  </div>

<script>
const $ = (sel) => document.querySelector(sel);
const out = $("#out"), stats = $("#stats"), err = $("#err");

function showError(msg){ err.style.display = "block"; err.textContent = msg; }

async function loadMore(row, dir){
  const idx = dir === "prev" ? row.dataset.start : row.dataset.end;
  const resp = await fetch(`/loadmore?type=${dir}&idx=${idx}`);
  if(!resp.ok){ showError(await resp.text()); return; }
  const text = await resp.json();
  const body = row.querySelector(".body");
  if(dir === "prev"){
    body.insertAdjacentText("afterbegin", text);
    row.dataset.start = Math.max(0, Number(row.dataset.start) - text.length);
  }else{
    body.insertAdjacentText("beforeend", text);
    row.dataset.end = Number(row.dataset.end) + text.length;
  }
}

async function search(ev){
  ev.preventDefault();
  const query = $("#q").value;
  err.style.display = "none";
  if(!query){ out.innerHTML = ""; stats.textContent = "Ready."; return; }
  const resp = await fetch(`/search?q=${encodeURIComponent(query)}`);
  if(!resp.ok){ showError(await resp.text()); return; }
  const results = await resp.json();
  stats.textContent = `Results: ${results.length}`;
  out.innerHTML = "";
  for(const r of results){
    const row = document.createElement("div");
    row.className = "row";
    row.dataset.start = r.contextStart;
    row.dataset.end = r.contextEnd;
    row.innerHTML = `<button class="more prev">prev</button> <span class="body">${r.snippet}</span> <button class="more nxt">next</button>`;
    row.querySelector(".prev").addEventListener("click", () => loadMore(row, "prev"));
    row.querySelector(".nxt").addEventListener("click", () => loadMore(row, "nxt"));
    out.appendChild(row);
  }
}

$("#form").addEventListener("submit", search);
</script>
</body>
</html>
"""


def main(argv=None) -> int:
    ap = argparse.ArgumentParser(description="Serve ShakeSearch over HTTP")
    ap.add_argument("--corpus", default=CFG.CORPUS_PATH, help="Text file to index")
    ap.add_argument("--host", default=CFG.DEFAULT_HOST)
    ap.add_argument("--port", type=int, default=None, help="Defaults to $PORT, else %d" % CFG.DEFAULT_PORT)
    ap.add_argument("--verbose", action="store_true")
    args = ap.parse_args(argv)

    if args.port is None:
        env_port = os.environ.get("PORT", "")
        if not env_port:
            args.port = CFG.DEFAULT_PORT
        elif env_port.isascii() and env_port.isdigit():
            args.port = int(env_port)
        else:
            ap.error(f"PORT must be an integer (got {env_port!r})")

    logging.basicConfig(level=logging.INFO if (args.verbose or CFG.VERBOSE) else logging.WARNING)

    engine = Engine()
    try:
        engine.build(args.corpus)
    except LoadError as exc:
        log.error("Cannot start: %s", exc)
        return 1

    app = create_app(engine)
    log.warning("Listening on %s:%d...", args.host, args.port)
    try:
        app.run(host=args.host, port=args.port, debug=args.verbose)
    finally:
        engine.shutdown()
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
