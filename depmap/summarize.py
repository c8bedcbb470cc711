from __future__ import annotations

from collections import Counter
from typing import Dict, List

from .model import GraphSummary, SourceModule


def count_edges(modules: Dict[str, SourceModule]) -> int:
	"""Distinct (source, target) pairs between modules that are both in the map."""
	pairs = set()
	for path, module in modules.items():
		for dep in module.dependencies:
			if dep.resolved_path in modules:
				pairs.add((path, dep.resolved_path))
	return len(pairs)


def summarize_graph(modules: Dict[str, SourceModule], top: int = 10) -> GraphSummary:
	by_category = Counter(m.category for m in modules.values())
	by_language = Counter(m.language_id for m in modules.values())
	unresolved = sum(1 for m in modules.values() for dep in m.dependencies if not dep.is_valid)
	edge_count = count_edges(modules)

	ranked: List[SourceModule] = sorted(
		(m for m in modules.values() if m.dependents),
		key=lambda m: (-len(m.dependents), m.relative_path),
	)

	overview = (
		f"{len(modules)} modules, {edge_count} internal dependencies, "
		f"{unresolved} external or unresolved imports"
	)

	return GraphSummary(
		module_count=len(modules),
		edge_count=edge_count,
		unresolved_count=unresolved,
		by_category=dict(sorted(by_category.items())),
		by_language=dict(sorted(by_language.items())),
		most_depended_on=[m.relative_path for m in ranked[:top]],
		overview=overview,
	)
