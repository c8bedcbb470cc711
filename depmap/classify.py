"""Rule tables mapping files and dependency edges to presentation categories.

Both classifiers are ordered rule lists: the first rule that matches wins,
so reordering a table changes results.
"""

from __future__ import annotations

from typing import Dict, List, Tuple

from .model import EdgeKind, FileCategory


ENTRY_FILE_STEMS = ("index.",)

ENTRY_FILE_NAMES = {"__init__.py"}

# (category, path substrings, file name substrings)
FILE_RULES: List[Tuple[FileCategory, Tuple[str, ...], Tuple[str, ...]]] = [
	(
		"entry",
		("/main/", "/entry/"),
		("files-and-dirs", "options"),
	),
	(
		"report",
		("/report/", "/reports/", "/transform/", "/transforms/", "/graph-"),
		("report", "transform", "consolidate", "match-facade", "gosubsum"),
	),
	(
		"tool",
		("/bin/", "/cache/", "/tools/", "/tool/"),
		("hotspots", "wrap-stream", "options-compatible"),
	),
	(
		"config",
		(
			"/validate/",
			"/validators/",
			"/config/",
			"/configs/",
			"/config-",
			"/cli/",
			"/indexers/",
			"/performance/",
			"/utils/",
			"/util/",
			"/helpers/",
		),
		("validator", "config", "format-helpers", "merge-configs", "match-dependency-rule"),
	),
	(
		"core",
		(
			"/enrich/",
			"/extract/",
			"/schema/",
			"/schemas/",
			"/summarize/",
			"/acorn/",
			"/tsc/",
			"/resolve/",
			"/transpile/",
		),
		(
			"extract",
			"schema",
			"enrich",
			"summarize",
			"reachable",
			"derive",
			"main-result-schema",
		),
	),
]

DEFAULT_CATEGORY: FileCategory = "entry"

NODE_STROKE_COLORS: Dict[str, str] = {
	"core": "#00AA00",
	"report": "#CC00CC",
	"config": "#0066FF",
	"tool": "#FF6600",
	"entry": "#666666",
}

NODE_STYLE_CLASSES: Dict[str, str] = {
	"core": "coreStyle",
	"report": "reportStyle",
	"config": "configStyle",
	"tool": "toolStyle",
	"entry": "entryStyle",
}

EDGE_COLORS: Dict[str, str] = {
	"normal": "#0066CC",
	"processing": "#00AA00",
	"special": "#CC0000",
	"internal": "#8B00FF",
	"utility": "#FF6600",
	"indirect": "#0099CC",
}


def classify_file(relative_path: str, file_name: str) -> FileCategory:
	lower_path = relative_path.lower()
	lower_name = file_name.lower()

	if lower_name in ENTRY_FILE_NAMES or lower_name.startswith(ENTRY_FILE_STEMS):
		return "entry"
	for category, path_parts, name_parts in FILE_RULES:
		if any(p in lower_path for p in path_parts) or any(n in lower_name for n in name_parts):
			return category
	return DEFAULT_CATEGORY


def _either_contains(source: str, target: str, *segments: str) -> bool:
	return any(seg in source or seg in target for seg in segments)


def classify_edge(
	source_category: str,
	target_category: str,
	source_path: str,
	target_path: str,
) -> EdgeKind:
	src = source_path.lower()
	dst = target_path.lower()

	if "config" in (source_category, target_category) or _either_contains(src, dst, "/config/", "/cli/"):
		return "indirect"
	if source_category == "report" and target_category == "report":
		return "internal"
	if (source_category == "core" and target_category == "core") or _either_contains(
		src, dst, "/extract/", "/enrich/"
	):
		return "processing"
	if "tool" in (source_category, target_category) or _either_contains(src, dst, "/utils/"):
		return "utility"
	if "/options/" in src or "/resolve/" in dst:
		return "special"
	return "normal"


def node_stroke_color(category: str) -> str:
	return NODE_STROKE_COLORS.get(category, NODE_STROKE_COLORS["entry"])


def node_style_class(category: str) -> str:
	return NODE_STYLE_CLASSES.get(category, NODE_STYLE_CLASSES["entry"])


def edge_color(kind: str) -> str:
	return EDGE_COLORS.get(kind, EDGE_COLORS["normal"])


def edge_style(kind: str) -> str:
	"""Return "dashed" for indirect edges and "solid" for everything else."""
	return "dashed" if kind == "indirect" else "solid"
