import argparse
from pathlib import Path

from api.config import CONTENT_DIR, CONTENT_URL, HOST, LOG_LEVEL, PORT, PROBE_WORKERS
from api.utils import json_dump, read_json_file
from availability import probe_availability
from content import DirectoryContentSource, HttpContentSource, parse_topic_document
from core.logging_setup import setup_console_logging
from errors import QuizLoadError
from serialization import serialize_catalog, serialize_metadata


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Security+ practice quiz tools")
    commands = parser.add_subparsers(dest="command", required=True)

    probe = commands.add_parser("probe", help="Check which content files exist")
    source = probe.add_mutually_exclusive_group()
    source.add_argument("--url", default=CONTENT_URL, help="Content server base URL")
    source.add_argument("--dir", type=Path, default=None, help="Content directory")
    probe.add_argument(
        "--workers",
        type=int,
        default=PROBE_WORKERS,
        help="Parallel checks (1 = one at a time)",
    )
    probe.add_argument("--json", action="store_true", help="Print JSON output")

    validate = commands.add_parser("validate", help="Validate content files")
    validate.add_argument("files", type=Path, nargs="+", help="Content JSON files")

    serve = commands.add_parser("serve", help="Run the content server")
    serve.add_argument("--host", default=HOST)
    serve.add_argument("--port", type=int, default=PORT)
    serve.add_argument("--content-dir", type=Path, default=None)

    commands.add_parser("desktop", help="Launch the desktop quiz")
    return parser.parse_args(argv)


def run_probe(args: argparse.Namespace) -> int:
    if args.dir is not None:
        source = DirectoryContentSource(args.dir)
    elif args.url:
        source = HttpContentSource(args.url)
    else:
        source = DirectoryContentSource(CONTENT_DIR)
    availability = probe_availability(source, max_workers=args.workers)
    catalog = serialize_catalog(availability)
    if args.json:
        print(json_dump(catalog))
        return 0
    for heading, key in (("Topics", "topics"), ("Practice Tests", "practiceTests")):
        print(f"{heading}:")
        for entry in catalog[key]:
            print(f"  {entry['title']:<40} {entry['status']}")
    print(f"{catalog['itemsAvailable']} Items Available")
    return 0


def run_validate(args: argparse.Namespace) -> int:
    failures = 0
    for path in args.files:
        try:
            payload = read_json_file(path)
            topic = parse_topic_document(path.stem, payload)
        except (OSError, ValueError) as exc:
            failures += 1
            print(f"FAIL {path}: {exc}")
            continue
        except QuizLoadError as exc:
            failures += 1
            print(f"FAIL {path}: {exc.reason}")
            continue
        metadata = serialize_metadata(topic)
        print(
            f"OK   {path}: {metadata['questionCount']} questions, "
            f"{metadata['multiSelectCount']} multi-select"
        )
    return 1 if failures else 0


def run_serve(args: argparse.Namespace) -> int:
    import uvicorn

    from api.utils import paths

    if args.content_dir is not None:
        paths.CONTENT_DIR = args.content_dir
    uvicorn.run("api.app:app", host=args.host, port=args.port, log_level="info")
    return 0


def run_desktop(args: argparse.Namespace) -> int:
    from app.main import QuizApp

    app = QuizApp()
    app.mainloop()
    return 0


COMMANDS = {
    "probe": run_probe,
    "validate": run_validate,
    "serve": run_serve,
    "desktop": run_desktop,
}


def main(argv: list[str] | None = None) -> int:
    setup_console_logging(LOG_LEVEL)
    args = parse_args(argv)
    return COMMANDS[args.command](args)


if __name__ == "__main__":
    raise SystemExit(main())
