from __future__ import annotations

import logging
import os
from typing import Dict, Iterable, List

logger = logging.getLogger(__name__)


EXTENSION_LANGUAGE: Dict[str, str] = {
	".js": "javascript",
	".jsx": "javascript",
	".mjs": "javascript",
	".cjs": "javascript",
	".ts": "typescript",
	".tsx": "typescript",
	".py": "python",
	".java": "java",
	".cpp": "cpp",
	".cxx": "cpp",
	".cc": "cpp",
	".c": "c",
	".h": "c",
	".hpp": "cpp",
	".rs": "rust",
	".go": "go",
}

SUPPORTED_EXTENSIONS = frozenset(EXTENSION_LANGUAGE)

IGNORED_NAMES = frozenset({"node_modules", ".git", "dist", "build"})


def detect_language(filename: str) -> str:
	_, ext = os.path.splitext(filename)
	return EXTENSION_LANGUAGE.get(ext, "unknown")


def is_supported(filename: str) -> bool:
	return os.path.splitext(filename)[1] in SUPPORTED_EXTENSIONS


def _is_ignored(name: str) -> bool:
	return name.startswith(".") or name in IGNORED_NAMES


def _log_walk_error(err: OSError) -> None:
	logger.warning("Skipping unreadable directory %s: %s", err.filename, err)


def scan_repository(root: str) -> List[str]:
	"""Return absolute paths of every supported source file under ``root``.

	Dot-prefixed entries and the fixed ignore names are pruned. Directories
	and files are visited in sorted order so repeated scans agree.
	"""
	files: List[str] = []
	root = os.path.abspath(root)
	for dirpath, dirnames, filenames in os.walk(root, onerror=_log_walk_error):
		dirnames[:] = sorted(d for d in dirnames if not _is_ignored(d))
		for filename in sorted(filenames):
			if _is_ignored(filename) or not is_supported(filename):
				continue
			path = os.path.join(dirpath, filename)
			if os.path.isfile(path):
				files.append(path)
	return files


def _is_within(path: str, directory: str) -> bool:
	rel = os.path.relpath(path, directory)
	return rel != os.pardir and not rel.startswith(os.pardir + os.sep) and not os.path.isabs(rel)


def files_from_paths(root: str, selected_paths: Iterable[str]) -> List[str]:
	"""Resolve explicitly selected files and directories to a file list.

	Files are taken as given. A directory selects every file of a full
	workspace scan that falls under it. Missing paths are logged and skipped.
	"""
	root = os.path.abspath(root)
	files: List[str] = []
	workspace_files = None
	for selected in selected_paths:
		path = os.path.abspath(os.path.join(root, selected))
		if os.path.isfile(path):
			files.append(path)
		elif os.path.isdir(path):
			if workspace_files is None:
				workspace_files = scan_repository(root)
			files.extend(f for f in workspace_files if _is_within(f, path))
		else:
			logger.warning("Selected path does not exist: %s", path)
	return list(dict.fromkeys(files))
