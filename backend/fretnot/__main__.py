"""Command-line interface.

    python -m fretnot render --frets 2xx232 --title "D/F#" -o chord.png
    python -m fretnot render --frets 12,x,0,10,9,9 --starting-fret 9 --format svg -o -
    python -m fretnot serve --port 8000
"""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path

from fretnot.models.fretboard import Fretboard
from fretnot.render.diagram import DiagramOptions, OutputFormat, render_fretboard

logger = logging.getLogger("fretnot")

_SUFFIX_FORMATS = {
    ".svg": OutputFormat.SVG,
    ".png": OutputFormat.PNG,
    ".jpg": OutputFormat.JPEG,
    ".jpeg": OutputFormat.JPEG,
}


def infer_format(output: str, explicit: str | None) -> OutputFormat:
    if explicit:
        return OutputFormat(explicit)
    fmt = _SUFFIX_FORMATS.get(Path(output).suffix.lower())
    if fmt is None:
        # stdout and unknown extensions default to SVG text
        return OutputFormat.SVG
    return fmt


def build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(prog="fretnot", description="Render guitar chord diagrams.")
    sub = p.add_subparsers(dest="command", required=True)

    r = sub.add_parser("render", help="Render one diagram to a file or stdout.")
    r.add_argument("--frets", required=True, help='Fret string, e.g. "2xx232" or "12,x,0,10,9,9".')
    r.add_argument("--title", default="", help="Title drawn above the diagram.")
    r.add_argument("--starting-fret", type=int, default=1, help="Fret number of the top row.")
    r.add_argument("--bg", default="rgba(0,0,0,0)", help="Background paint.")
    r.add_argument(
        "--format",
        choices=[f.value for f in OutputFormat],
        help="Output format (default: from the -o extension, else svg).",
    )
    r.add_argument("-o", "--output", default="-", help='Output path, "-" for stdout.')

    s = sub.add_parser("serve", help="Run the HTTP service.")
    s.add_argument("--host", default="127.0.0.1")
    s.add_argument("--port", type=int, default=8000)
    s.add_argument("--reload", action="store_true")
    return p


def _render(args: argparse.Namespace) -> int:
    fmt = infer_format(args.output, args.format)
    options = DiagramOptions(title=args.title, background=args.bg, starting_fret=args.starting_fret)
    result = render_fretboard(Fretboard(args.frets), options, fmt)
    data = result.encode("utf-8") if isinstance(result, str) else result

    if args.output == "-":
        sys.stdout.buffer.write(data)
        if fmt is OutputFormat.DATA_URL:
            sys.stdout.buffer.write(b"\n")
        sys.stdout.flush()
    else:
        Path(args.output).write_bytes(data)
        logger.info("Wrote %s (%d bytes)", args.output, len(data))
    return 0


def _serve(args: argparse.Namespace) -> int:
    import uvicorn

    uvicorn.run("fretnot.main:app", host=args.host, port=args.port, reload=args.reload)
    return 0


def main(argv: list[str] | None = None) -> int:
    args = build_parser().parse_args(argv)
    logging.basicConfig(level=logging.INFO, format="%(asctime)s %(name)s %(levelname)s %(message)s")
    try:
        if args.command == "serve":
            return _serve(args)
        return _render(args)
    except (OSError, ValueError) as e:
        print(f"fretnot: {e}", file=sys.stderr)
        return 1


if __name__ == "__main__":
    sys.exit(main())
