from __future__ import annotations

import os
from typing import Dict, Iterable, Optional, Tuple

from .analyze import analyze_codebase
from .config import Settings
from .mermaid import MermaidGenerator
from .model import SourceModule


class WorkspaceError(ValueError):
	"""Raised when there is no workspace directory to analyze."""


def require_workspace(root: Optional[str]) -> str:
	if not root:
		raise WorkspaceError("No workspace folder given")
	root = os.path.abspath(root)
	if not os.path.isdir(root):
		raise WorkspaceError(f"Workspace folder does not exist: {root}")
	return root


def generate_mermaid(modules: Dict[str, SourceModule], minify: bool = True) -> str:
	return MermaidGenerator(modules, minify=minify).generate()


def build_graph(
	root: str,
	selected_paths: Optional[Iterable[str]] = None,
	settings: Optional[Settings] = None,
) -> Tuple[Dict[str, SourceModule], str]:
	"""Analyze ``root`` and render it; returns the module map and the diagram text."""
	settings = settings or Settings()
	root = require_workspace(root)
	modules = analyze_codebase(root, selected_paths, settings)
	return modules, generate_mermaid(modules, minify=settings.minify)
