"""Dependency graph engine: recover which source files import which and draw it.

Modules:
- fs_scan.py: Workspace walk, supported extensions and language detection.
- resolve.py: Import specifier to file resolution (JS/TS and Python).
- extract.py: Per-file dependency, function and export extraction.
- classify.py: File category and edge kind rule tables, plus their colors.
- analyze.py: Two-phase orchestration producing the linked module map.
- mermaid.py: Hierarchical Mermaid flowchart rendering.
- graph.py: One-call facade from workspace root to diagram text.
- summarize.py: Counts and rankings for a finished module map.
- model.py: Pydantic records shared by all of the above.
"""

__all__ = [
	"analyze",
	"classify",
	"config",
	"extract",
	"fs_scan",
	"graph",
	"mermaid",
	"model",
	"resolve",
	"summarize",
]
