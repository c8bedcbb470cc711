from __future__ import annotations

from typing import List, Optional

from fastapi import FastAPI, HTTPException
from pydantic import BaseModel

from depmap.config import Settings
from depmap.graph import WorkspaceError, build_graph, require_workspace
from depmap.model import AnalyzeResult, GraphResult
from depmap.summarize import summarize_graph


app = FastAPI(title="Dependency Graph Analyzer")


class AnalyzeRequest(BaseModel):
	root_path: str
	paths: Optional[List[str]] = None
	minify: bool = True


def _run(req: AnalyzeRequest):
	try:
		root = require_workspace(req.root_path)
	except WorkspaceError as e:
		raise HTTPException(status_code=400, detail=str(e))
	settings = Settings(minify=req.minify)
	modules, mermaid = build_graph(root, req.paths, settings)
	return root, modules, mermaid


@app.post("/analyze", response_model=AnalyzeResult)
def analyze(req: AnalyzeRequest) -> AnalyzeResult:
	root, modules, _ = _run(req)
	return AnalyzeResult(root=root, modules=list(modules.values()), summary=summarize_graph(modules))


@app.post("/graph", response_model=GraphResult)
def graph(req: AnalyzeRequest) -> GraphResult:
	root, modules, mermaid = _run(req)
	return GraphResult(root=root, mermaid=mermaid, summary=summarize_graph(modules))


def create_app() -> FastAPI:
	return app
