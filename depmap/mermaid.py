"""Render a module map as a Mermaid ``flowchart LR`` with folder subgraphs.

Mermaid addresses ``linkStyle`` directives by the index of the edge in
declaration order, so edges and their styles must be emitted from the same
list, in the same order.
"""

from __future__ import annotations

import logging
import re
from typing import Dict, List, Optional, Tuple

from .classify import classify_edge, edge_color, edge_style, node_style_class
from .model import SourceModule

logger = logging.getLogger(__name__)


CLASS_DEFINITIONS = [
	"classDef coreStyle fill:#90EE90,stroke:#00AA00,stroke-width:2px,color:#000",
	"classDef reportStyle fill:#FFB6C1,stroke:#CC00CC,stroke-width:2px,color:#000",
	"classDef configStyle fill:#87CEEB,stroke:#0066FF,stroke-width:2px,color:#000",
	"classDef toolStyle fill:#FFD700,stroke:#FF6600,stroke-width:2px,color:#000",
	"classDef entryStyle fill:#F5F5F5,stroke:#666666,stroke-width:2px,color:#000",
]

# Words the flowchart grammar reserves; ids equal to one get a trailing "_"
MERMAID_KEYWORDS = frozenset(
	{"end", "graph", "subgraph", "flowchart", "class", "classDef", "style", "linkStyle", "click", "direction", "call"}
)

ID_DIGITS = "0123456789ABCDEFGHIJKLMNOPQRSTUVWXYZ"

Edge = Tuple[str, str]


def _to_base36(number: int) -> str:
	digits = ""
	while True:
		number, rem = divmod(number, 36)
		digits = ID_DIGITS[rem] + digits
		if number == 0:
			return digits


def minified_node_id(index: int) -> str:
	# Letter prefix keeps the id from starting with a digit
	return "N" + _to_base36(index)


def readable_node_id(name: str) -> str:
	name = re.sub(r"^\.$|^\./", "__currentPath__", name)
	name = re.sub(r"^\.\.$|^\.\./", "__prevPath__", name)
	name = re.sub(r"[^\w]", "_", name)
	if name in MERMAID_KEYWORDS:
		name += "_"
	return name


def escape_mermaid_text(text: str) -> str:
	return (
		text.replace('"', "#quot;")
		.replace("<", "#60;")
		.replace(">", "#62;")
		.replace("\r\n", " ")
		.replace("\n", " ")
	)


def render_node(node_id: str, text: str) -> str:
	label = escape_mermaid_text(text) if text else " "
	return f'{node_id}["{label}"]'


def path_segments(relative_path: str) -> List[str]:
	return [seg for seg in relative_path.split("/") if seg]


class TreeNode:
	"""A folder (has children) or file (leaf) in the diagram hierarchy."""

	def __init__(self, node_id: str, label: str):
		self.node_id = node_id
		self.label = label
		self.children: Dict[str, TreeNode] = {}

	def insert(self, segments: List[str], node_ids: Dict[str, str], depth: int = 0) -> None:
		if depth >= len(segments):
			return
		name = segments[depth]
		child = self.children.get(name)
		if child is None:
			child = TreeNode(node_ids["/".join(segments[: depth + 1])], name)
			self.children[name] = child
		child.insert(segments, node_ids, depth + 1)

	def is_leaf(self) -> bool:
		return not self.children


class MermaidGenerator:
	def __init__(self, modules: Dict[str, SourceModule], minify: bool = True):
		self.modules = modules
		self.minify = minify
		self.node_ids: Dict[str, str] = {}
		self.path_ids: Dict[str, str] = {}
		self.id_to_module: Dict[str, SourceModule] = {}
		self._used_ids: set = set()

	def generate(self) -> str:
		self._assign_ids()
		tree = self._build_tree()
		edges = self._collect_edges()

		lines = ["flowchart LR", ""]
		lines.extend(CLASS_DEFINITIONS)
		lines.extend(self._render_tree(tree))
		lines.extend(f"{src}-->{dst}" for src, dst in edges)
		lines.extend(self._render_node_styles())
		lines.extend(self._render_edge_styles(edges))
		logger.debug("Rendered %d nodes, %d edges", len(self.id_to_module), len(edges))
		return "\n".join(lines) + "\n"

	def _register(self, name: str) -> str:
		node_id = self.node_ids.get(name)
		if node_id is not None:
			return node_id
		if self.minify:
			node_id = minified_node_id(len(self.node_ids))
		else:
			base = readable_node_id(name)
			node_id = base
			suffix = 2
			while node_id in self._used_ids:
				node_id = f"{base}_{suffix}"
				suffix += 1
		self._used_ids.add(node_id)
		self.node_ids[name] = node_id
		return node_id

	def _assign_ids(self) -> None:
		self.node_ids = {}
		self.path_ids = {}
		self.id_to_module = {}
		self._used_ids = set()

		for path, module in self.modules.items():
			segments = path_segments(module.relative_path)
			if not segments:
				continue
			for i in range(len(segments)):
				node_id = self._register("/".join(segments[: i + 1]))
			self.path_ids[path] = node_id
			self.id_to_module[node_id] = module

	def _build_tree(self) -> TreeNode:
		root = TreeNode("", "")
		for module in self.modules.values():
			root.insert(path_segments(module.relative_path), self.node_ids)
		return root

	def _collect_edges(self) -> List[Edge]:
		edges: List[Edge] = []
		seen = set()
		for path, module in self.modules.items():
			from_id = self.path_ids.get(path)
			if from_id is None:
				continue
			for dep in module.dependencies:
				if not dep.is_valid:
					continue
				to_id = self.path_ids.get(dep.resolved_path)
				if to_id is None or (from_id, to_id) in seen:
					continue
				seen.add((from_id, to_id))
				edges.append((from_id, to_id))
		return edges

	def _render_tree(self, node: TreeNode, depth: int = 0) -> List[str]:
		indent = "" if self.minify else "  " * depth
		lines: List[str] = []
		for child in node.children.values():
			if child.is_leaf():
				lines.append(indent + render_node(child.node_id, child.label))
				continue
			lines.append(f"{indent}subgraph {render_node(child.node_id, child.label)}")
			lines.extend(self._render_tree(child, depth + 1))
			lines.append(f"{indent}end")
		return lines

	def _render_node_styles(self) -> List[str]:
		return [
			f"class {node_id} {node_style_class(module.category)}"
			for node_id, module in self.id_to_module.items()
		]

	def _edge_kind(self, edge: Edge) -> str:
		source: Optional[SourceModule] = self.id_to_module.get(edge[0])
		target: Optional[SourceModule] = self.id_to_module.get(edge[1])
		if source is None or target is None:
			return "normal"
		return classify_edge(source.category, target.category, source.relative_path, target.relative_path)

	def _render_edge_styles(self, edges: List[Edge]) -> List[str]:
		styles: List[str] = []
		for index, edge in enumerate(edges):
			kind = self._edge_kind(edge)
			directive = f"linkStyle {index} stroke:{edge_color(kind)},stroke-width:2px"
			if edge_style(kind) == "dashed":
				directive += ",stroke-dasharray: 5 5"
			styles.append(directive)
		return styles
