from __future__ import annotations

import argparse
import json
import logging
import os
from typing import List, Optional

import uvicorn
from pydantic import ValidationError

from depmap.config import Settings
from depmap.graph import WorkspaceError, build_graph
from depmap.model import AnalyzeResult
from depmap.summarize import summarize_graph


def _positive_int(value: str) -> int:
	try:
		number = int(value)
	except ValueError:
		raise argparse.ArgumentTypeError(f"invalid int value: {value!r}")
	if number < 1:
		raise argparse.ArgumentTypeError(f"must be at least 1: {number}")
	return number


def _settings(args: argparse.Namespace) -> Settings:
	updates = {}
	if args.workers is not None:
		updates["max_workers"] = args.workers
	if getattr(args, "readable_ids", False):
		updates["minify"] = False
	return Settings(**updates)


def cmd_analyze(args: argparse.Namespace) -> None:
	modules, _ = build_graph(args.path, args.paths, _settings(args))
	result = AnalyzeResult(
		root=os.path.abspath(args.path),
		modules=list(modules.values()),
		summary=summarize_graph(modules),
	)
	print(json.dumps(result.model_dump(), indent=2))


def cmd_graph(args: argparse.Namespace) -> None:
	modules, mermaid = build_graph(args.path, args.paths, _settings(args))
	if args.output:
		with open(args.output, "w", encoding="utf-8") as fh:
			fh.write(mermaid)
		print(summarize_graph(modules).overview)
	else:
		print(mermaid, end="")


def cmd_serve(args: argparse.Namespace) -> None:
	uvicorn.run("api:app", host=args.host, port=args.port, reload=args.reload)


def _add_analysis_args(parser: argparse.ArgumentParser) -> None:
	parser.add_argument("path", help="Path to workspace root")
	parser.add_argument("--paths", nargs="+", default=None, help="Restrict analysis to these files or directories")
	parser.add_argument("--workers", type=_positive_int, default=None, help="Worker threads for file extraction")


def main(argv: Optional[List[str]] = None) -> None:
	parser = argparse.ArgumentParser(prog="depmap")
	parser.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging")
	sub = parser.add_subparsers(dest="cmd", required=True)

	pa = sub.add_parser("analyze", help="Analyze a workspace and print the module map as JSON")
	_add_analysis_args(pa)
	pa.set_defaults(func=cmd_analyze)

	pg = sub.add_parser("graph", help="Print the Mermaid dependency diagram")
	_add_analysis_args(pg)
	pg.add_argument("-o", "--output", default=None, help="Write the diagram to this file")
	pg.add_argument("--readable-ids", action="store_true", help="Use path-derived node ids instead of short ones")
	pg.set_defaults(func=cmd_graph)

	ps = sub.add_parser("serve", help="Run FastAPI server")
	ps.add_argument("--host", default="127.0.0.1")
	ps.add_argument("--port", type=int, default=8000)
	ps.add_argument("--reload", action="store_true")
	ps.set_defaults(func=cmd_serve)

	args = parser.parse_args(argv)

	logging.basicConfig(level=logging.WARNING, format="%(message)s")
	if args.verbose:
		logging.getLogger("depmap").setLevel(logging.DEBUG)

	try:
		args.func(args)
	except (WorkspaceError, ValidationError) as e:
		parser.error(str(e))


if __name__ == "__main__":
	main()
