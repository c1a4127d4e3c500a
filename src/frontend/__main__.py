from __future__ import annotations
import argparse, json
from shakesearch import Engine
from shakesearch import config as CFG
from shakesearch.errors import LoadError, ValidationError

def main(argv: list[str] | None = None) -> int:
    p = argparse.ArgumentParser(description="ShakeSearch CLI (Engine-backed)")
    p.add_argument("--corpus", default=CFG.CORPUS_PATH, help="Text file to index")
    p.add_argument("--q", default=None, help="Single query to run once")
    p.add_argument("--repl", action="store_true", help="Interactive loop after init")
    p.add_argument("--more", type=int, default=None, metavar="IDX", help="Print the text next to IDX")
    p.add_argument("--type", dest="direction", choices=["prev", "nxt"], default="nxt",
                   help="Side of IDX used by --more")
    p.add_argument("--limit", type=int, default=None, help="Show at most this many results")
    p.add_argument("--json", action="store_true", help="Emit JSON rows")
    p.add_argument("--verbose", action="store_true")

    args = p.parse_args(argv)

    eng = Engine()
    try:
        try:
            eng.build(args.corpus, verbose=args.verbose or CFG.VERBOSE)
        except LoadError as exc:
            print(f"error: {exc}")
            return 1

        def run_query(q: str) -> None:
            rows = eng.search(q)
            shown = rows if args.limit is None else rows[:max(0, args.limit)]
            if args.json:
                print(json.dumps([r.to_json() for r in shown], ensure_ascii=False, indent=2))
                return
            if not rows:
                print("(no matches)"); return
            print(f"{len(rows)} match(es)")
            for i, r in enumerate(shown, 1):
                span = f"[{r.context_start}:{r.context_end}]"
                print(f"{i:<3} {span:<18} {' '.join(r.snippet.split())}")

        try:
            if args.more is not None:
                text = eng.expand_context(args.more, args.direction)
                print(json.dumps(text, ensure_ascii=False) if args.json else text)

            if args.q is not None:
                run_query(args.q)
        except ValidationError as exc:
            print(f"error: {exc}")
            return 2

        if args.repl:
            print("Type a query (empty line to exit).")
            while True:
                try:
                    q = input("> ")
                except (EOFError, KeyboardInterrupt):
                    break
                if not q:
                    break
                run_query(q)

        return 0
    finally:
        eng.shutdown()

if __name__ == "__main__":
    raise SystemExit(main())
