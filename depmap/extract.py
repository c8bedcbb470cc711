"""Heuristic, regex-based extraction of imports, functions and exports.

This is deliberately not a parser: each language has an ordered table of
patterns and every match becomes one record, in match order. Anything the
patterns miss (dynamic imports, computed paths) is simply not reported.
"""

from __future__ import annotations

import logging
import os
import re
from typing import List, Optional, Pattern, Tuple

from .classify import classify_file
from .fs_scan import detect_language
from .model import Dependency, SourceModule
from .resolve import resolve_module_path, resolve_python_module

logger = logging.getLogger(__name__)


SCRIPT_LANGUAGES = frozenset({"javascript", "typescript"})

# (kind, pattern) scanned independently, so a file mixing both module styles
# reports an import and a require for the same path.
SCRIPT_DEPENDENCY_PATTERNS: List[Tuple[str, Pattern[str]]] = [
	(
		"import",
		re.compile(
			r"""\bimport\s+(?:(?:type\s+)?(?:[\w$]+\s*,\s*)?(?:\*\s+as\s+[\w$]+|\{[^}]*\}|[\w$]+)\s+from\s+)?['"]([^'"\n]+)['"]"""
		),
	),
	("require", re.compile(r"""\brequire\s*\(\s*['"]([^'"\n]+)['"]\s*\)""")),
]

PYTHON_IMPORT_PATTERN = re.compile(r"^[ \t]*(?:import|from)[ \t]+([\w.]+)", re.MULTILINE)

SCRIPT_FUNCTION_PATTERNS: List[Pattern[str]] = [
	re.compile(r"(?:export\s+)?(?:async\s+)?\bfunction\b\s*\*?\s*([\w$]+)"),
	re.compile(r"(?:export\s+)?(?:const|let|var)\s+([\w$]+)\s*[:=]\s*(?:async\s*)?\("),
]

SCRIPT_METHOD_PATTERN = re.compile(r"(?:public\s+|private\s+|protected\s+)?([\w$]+)\s*\(")

NOT_METHODS = frozenset(
	{"if", "for", "while", "switch", "catch", "return", "function", "async", "require", "import"}
)

PYTHON_FUNCTION_PATTERN = re.compile(r"\bdef\s+(\w+)\s*\(")

SCRIPT_EXPORT_PATTERN = re.compile(
	r"export\s+(?:default\s+)?(?:async\s+)?(?:function|const|let|var|class)\s+([\w$]+)"
)

PYTHON_ALL_PATTERN = re.compile(r"__all__\s*=\s*[\[(]([^\])]*)[\])]")


def python_candidate(token: str) -> str:
	"""Reduce an imported dotted name to the part that is resolved.

	``pkg.sub`` becomes ``pkg``; relative names keep their leading dots, so
	``..core.models`` becomes ``..core``.
	"""
	name = token.lstrip(".")
	dots = token[: len(token) - len(name)]
	return dots + name.split(".")[0]


def extract_dependencies(content: str, file_path: str, language_id: str, workspace_root: str) -> List[Dependency]:
	dependencies: List[Dependency] = []

	if language_id in SCRIPT_LANGUAGES:
		for kind, pattern in SCRIPT_DEPENDENCY_PATTERNS:
			for match in pattern.finditer(content):
				raw = match.group(1)
				dependencies.append(
					Dependency(
						raw_module_path=raw,
						resolved_path=resolve_module_path(raw, file_path, workspace_root),
						kind=kind,
					)
				)
	elif language_id == "python":
		for match in PYTHON_IMPORT_PATTERN.finditer(content):
			raw = python_candidate(match.group(1))
			dependencies.append(
				Dependency(
					raw_module_path=raw,
					resolved_path=resolve_python_module(raw, file_path, workspace_root),
					kind="import",
				)
			)

	return dependencies


def extract_functions(content: str, language_id: str) -> List[str]:
	functions: List[str] = []

	if language_id in SCRIPT_LANGUAGES:
		for pattern in SCRIPT_FUNCTION_PATTERNS:
			functions.extend(m.group(1) for m in pattern.finditer(content))
		for match in SCRIPT_METHOD_PATTERN.finditer(content):
			name = match.group(1)
			if name not in NOT_METHODS and name not in functions:
				functions.append(name)
	elif language_id == "python":
		functions.extend(m.group(1) for m in PYTHON_FUNCTION_PATTERN.finditer(content))

	return functions


def extract_exports(content: str, language_id: str) -> List[str]:
	if language_id in SCRIPT_LANGUAGES:
		return [m.group(1) for m in SCRIPT_EXPORT_PATTERN.finditer(content)]
	if language_id == "python":
		match = PYTHON_ALL_PATTERN.search(content)
		if match:
			items = (item.strip().strip("'\"") for item in match.group(1).split(","))
			return [item for item in items if item]
	return []


def _read_text(path: str) -> Optional[str]:
	try:
		with open(path, "r", encoding="utf-8") as fh:
			return fh.read()
	except (OSError, UnicodeDecodeError) as e:
		logger.warning("Could not read %s: %s", path, e)
		return None


def analyze_file(path: str, workspace_root: str) -> Optional[SourceModule]:
	"""Build the module record for one file, or ``None`` if it can't be read."""
	content = _read_text(path)
	if content is None:
		return None

	relative_path = os.path.relpath(path, workspace_root).replace(os.sep, "/")
	file_name = os.path.basename(path)
	language_id = detect_language(file_name)

	return SourceModule(
		absolute_path=path,
		relative_path=relative_path,
		file_name=file_name,
		language_id=language_id,
		category=classify_file(relative_path, file_name),
		dependencies=extract_dependencies(content, path, language_id, workspace_root),
		functions=extract_functions(content, language_id),
		exports=extract_exports(content, language_id),
	)
