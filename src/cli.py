from __future__ import annotations

import argparse
import json
import logging
import sys
from typing import IO, Sequence

from src.adapters.export.graphml_exporter import GraphMLExporter
from src.adapters.ingest import (
    DocumentError,
    parse_base_document,
    parse_stat_document,
    read_json,
)
from src.adapters.persistence.factory import snapshot_repository
from src.app.services.base_builder import BaseBuilder
from src.app.services.request_handler import RequestHandler
from src.config import AppConfig, ConfigError, configure_logging
from src.domain.exceptions import CatalogueError, SnapshotError

logger = logging.getLogger("transit_catalogue")


def make_base(config: AppConfig, stdin: IO[str]) -> None:
    doc = parse_base_document(read_json(stdin))
    repository = snapshot_repository(config, path=doc.snapshot_path)
    BaseBuilder(snapshot_repository=repository).build(doc.base_input)
    logger.info("Snapshot written to %s", repository.location())


def process_requests(config: AppConfig, stdin: IO[str], stdout: IO[str]) -> None:
    doc = parse_stat_document(read_json(stdin))
    repository = snapshot_repository(config, path=doc.snapshot_path)

    # Any load failure aborts before the first request is answered.
    handler = RequestHandler.from_repository(repository)
    responses = handler.process(doc.requests)

    json.dump(responses, stdout, ensure_ascii=False, indent=2)
    stdout.write("\n")


def export_graph(config: AppConfig, *, snapshot: str | None, output: str) -> None:
    repository = snapshot_repository(config, path=snapshot)
    handler = RequestHandler.from_repository(repository)
    GraphMLExporter(catalogue=handler.catalogue, path=output).export(
        handler.resolver.network
    )
    logger.info("Routing graph exported to %s", output)


def serve(*, host: str, port: int) -> None:
    import uvicorn

    uvicorn.run("src.main:app", host=host, port=port)


def _parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="transit-catalogue",
        description="Build a bus network snapshot and answer routing requests.",
    )
    sub = parser.add_subparsers(dest="mode", required=True)

    sub.add_parser(
        "make_base", help="Read base requests (JSON, stdin) and write a snapshot."
    )
    sub.add_parser(
        "process_requests",
        help="Read stat requests (JSON, stdin) and print responses (JSON, stdout).",
    )

    export = sub.add_parser("export_graph", help="Write the routing graph as GraphML.")
    export.add_argument("--snapshot", default=None, help="Snapshot file path.")
    export.add_argument("--output", required=True, help="GraphML output path.")

    srv = sub.add_parser("serve", help="Run the HTTP API.")
    srv.add_argument("--host", default="127.0.0.1")
    srv.add_argument("--port", type=int, default=8000)

    return parser


def main(argv: Sequence[str] | None = None) -> int:
    args = _parser().parse_args(argv)

    try:
        config = AppConfig.from_env()
        configure_logging(config.log_level)

        if args.mode == "make_base":
            make_base(config, sys.stdin)
        elif args.mode == "process_requests":
            process_requests(config, sys.stdin, sys.stdout)
        elif args.mode == "export_graph":
            export_graph(config, snapshot=args.snapshot, output=args.output)
        else:
            serve(host=args.host, port=args.port)
    except DocumentError as exc:
        print(f"Invalid input document: {exc}", file=sys.stderr)
        return 1
    except CatalogueError as exc:
        print(f"Invalid catalogue: {exc}", file=sys.stderr)
        return 1
    except SnapshotError as exc:
        print(f"Deserialization error: {exc}", file=sys.stderr)
        return 1
    except ConfigError as exc:
        print(f"Configuration error: {exc}", file=sys.stderr)
        return 1

    return 0


if __name__ == "__main__":
    sys.exit(main())
