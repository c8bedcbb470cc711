import json

import pytest

import cli


def _workspace(tmp_path):
	(tmp_path / "pkg").mkdir(parents=True)
	(tmp_path / "pkg" / "mod.py").write_text("from utils import helper\n")
	(tmp_path / "pkg" / "utils.py").write_text("def helper():\n    pass\n")
	return tmp_path


def test_graph_prints_diagram(tmp_path, capsys):
	root = _workspace(tmp_path)
	cli.main(["graph", str(root)])
	out = capsys.readouterr().out

	assert out.startswith("flowchart LR\n")
	assert "N1-->N2" in out
	assert 'subgraph N0["pkg"]' in out


def test_graph_writes_output_file(tmp_path, capsys):
	root = _workspace(tmp_path / "ws")
	target = tmp_path / "graph.mmd"
	cli.main(["graph", str(root), "-o", str(target), "--readable-ids", "--workers", "2"])

	assert "pkg_mod_py-->pkg_utils_py" in target.read_text()
	assert capsys.readouterr().out.startswith("2 modules, 1 internal dependencies")


def test_analyze_prints_json(tmp_path, capsys):
	root = _workspace(tmp_path)
	cli.main(["analyze", str(root), "--paths", "pkg/utils.py"])
	data = json.loads(capsys.readouterr().out)

	assert data["root"] == str(root)
	assert [m["file_name"] for m in data["modules"]] == ["utils.py"]
	assert data["summary"]["module_count"] == 1


def test_missing_workspace_exits(tmp_path):
	with pytest.raises(SystemExit) as exc:
		cli.main(["graph", str(tmp_path / "nope")])
	assert exc.value.code == 2


@pytest.mark.parametrize("workers", ["0", "-2", "many"])
def test_invalid_worker_count_exits(tmp_path, workers):
	root = _workspace(tmp_path)
	with pytest.raises(SystemExit) as exc:
		cli.main(["graph", str(root), "--workers", workers])
	assert exc.value.code == 2


def test_invalid_environment_setting_exits(tmp_path, monkeypatch, capsys):
	root = _workspace(tmp_path)
	monkeypatch.setenv("DEPMAP_MAX_WORKERS", "0")
	with pytest.raises(SystemExit) as exc:
		cli.main(["graph", str(root)])
	assert exc.value.code == 2
	assert "max_workers" in capsys.readouterr().err
