from __future__ import annotations

import logging
import os
from concurrent.futures import ThreadPoolExecutor
from typing import Dict, Iterable, List, Optional

from .config import Settings
from .extract import analyze_file
from .fs_scan import files_from_paths, scan_repository
from .model import SourceModule

logger = logging.getLogger(__name__)


def discover_files(root: str, selected_paths: Optional[Iterable[str]] = None) -> List[str]:
	if selected_paths:
		return files_from_paths(root, selected_paths)
	return scan_repository(root)


def _analyze_one(path: str, root: str) -> Optional[SourceModule]:
	try:
		return analyze_file(path, root)
	except Exception:
		logger.exception("Failed to analyze %s", path)
		return None


def link_dependents(modules: Dict[str, SourceModule]) -> int:
	"""Fill each module's ``dependents`` from every other module's resolved imports.

	Only targets present in ``modules`` receive a backlink. Returns the
	number of backlinks added.
	"""
	linked = 0
	for source, module in modules.items():
		for dep in module.dependencies:
			target = modules.get(dep.resolved_path) if dep.resolved_path else None
			if target is not None and source not in target.dependents:
				target.dependents.append(source)
				linked += 1
	return linked


def analyze_codebase(
	root: str,
	selected_paths: Optional[Iterable[str]] = None,
	settings: Optional[Settings] = None,
) -> Dict[str, SourceModule]:
	"""Analyze every discovered file and return the linked module map.

	Files are read on a bounded thread pool; results are inserted by this
	thread in discovery order, and dependents are linked only once every
	file has been processed.
	"""
	root = os.path.abspath(root)
	settings = settings or Settings()
	files = discover_files(root, selected_paths)
	logger.debug("Discovered %d files under %s", len(files), root)

	modules: Dict[str, SourceModule] = {}
	with ThreadPoolExecutor(max_workers=settings.max_workers) as executor:
		results = list(executor.map(lambda path: _analyze_one(path, root), files))

	for module in results:
		if module is not None:
			modules.setdefault(module.absolute_path, module)
	logger.debug("Analyzed %d modules", len(modules))

	linked = link_dependents(modules)
	logger.debug("Linked %d dependents", linked)
	return modules
