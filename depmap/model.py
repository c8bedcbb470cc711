from __future__ import annotations

from typing import Dict, List, Literal, Optional

from pydantic import BaseModel, Field, computed_field


FileCategory = Literal["core", "report", "config", "tool", "entry"]

EdgeKind = Literal["normal", "processing", "special", "internal", "utility", "indirect"]


class Dependency(BaseModel):
	raw_module_path: str
	resolved_path: Optional[str] = None
	kind: str = "import"

	@computed_field  # type: ignore[misc]
	@property
	def is_valid(self) -> bool:
		return self.resolved_path is not None


class SourceModule(BaseModel):
	absolute_path: str
	relative_path: str
	file_name: str
	language_id: str
	category: FileCategory = Field(frozen=True)
	dependencies: List[Dependency] = []
	dependents: List[str] = []
	functions: List[str] = []
	exports: List[str] = []


class GraphSummary(BaseModel):
	module_count: int
	edge_count: int
	unresolved_count: int
	by_category: Dict[str, int] = {}
	by_language: Dict[str, int] = {}
	most_depended_on: List[str] = []
	overview: str = ""


class AnalyzeResult(BaseModel):
	root: str
	modules: List[SourceModule]
	summary: GraphSummary


class GraphResult(BaseModel):
	root: str
	mermaid: str
	summary: GraphSummary
