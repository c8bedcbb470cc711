"""Map raw import strings to files on disk.

Probing order is fixed: the first existing candidate wins. Any filesystem
error while probing counts as "not found".
"""

from __future__ import annotations

import os
from typing import Iterable, Optional


SCRIPT_EXTENSIONS = ("", ".js", ".ts", ".jsx", ".tsx", ".mjs", ".cjs")

INDEX_FILES = ("index.js", "index.ts", "index.jsx", "index.tsx")


def _first_file(candidates: Iterable[str]) -> Optional[str]:
	for candidate in candidates:
		try:
			if os.path.isfile(candidate):
				return candidate
		except (OSError, ValueError):
			continue
	return None


def is_external(module_path: str) -> bool:
	return not module_path.startswith((".", "/"))


def resolve_module_path(module_path: str, from_file: str, workspace_root: str) -> Optional[str]:
	"""Resolve a JS/TS import specifier.

	Bare specifiers ("lodash", "@scope/pkg") are packages and never touch the
	filesystem. "/x" is rooted at the workspace, "./x" at the importing file.
	"""
	if is_external(module_path):
		return None

	if module_path.startswith("/"):
		base = os.path.join(workspace_root, module_path.lstrip("/"))
	else:
		base = os.path.join(os.path.dirname(from_file), module_path)
	base = os.path.normpath(base)

	found = _first_file(base + ext for ext in SCRIPT_EXTENSIONS)
	if found:
		return found
	return _first_file(os.path.join(base, index) for index in INDEX_FILES)


def _python_candidates(base: str) -> Iterable[str]:
	yield base + ".py"
	yield os.path.join(base, "__init__.py")


def resolve_python_module(module_path: str, from_file: str, workspace_root: str) -> Optional[str]:
	"""Resolve a Python module name to ``<path>.py`` or ``<path>/__init__.py``.

	Leading dots make the name relative: one dot is the importing package,
	each further dot climbs one directory. A bare name is looked up beside
	the importing file and then at the workspace root; if neither exists it
	is treated as stdlib or third-party.
	"""
	if not module_path or "/" in module_path or "\\" in module_path:
		return None

	from_dir = os.path.dirname(from_file)
	name = module_path.lstrip(".")
	level = len(module_path) - len(name)
	parts = [p for p in name.split(".") if p]

	if level:
		base = from_dir
		for _ in range(level - 1):
			base = os.path.dirname(base)
		if not parts:
			return _first_file([os.path.join(base, "__init__.py")])
		bases = [os.path.join(base, *parts)]
	elif parts:
		bases = [os.path.join(from_dir, *parts), os.path.join(workspace_root, *parts)]
	else:
		return None

	for base in bases:
		found = _first_file(_python_candidates(os.path.normpath(base)))
		if found:
			return found
	return None
