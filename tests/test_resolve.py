import os

from depmap.resolve import resolve_module_path, resolve_python_module


def _touch(path):
	path.parent.mkdir(parents=True, exist_ok=True)
	path.write_text("")
	return str(path)


def test_relative_import_probes_extensions_in_order(tmp_path):
	importer = _touch(tmp_path / "src" / "main.ts")
	_touch(tmp_path / "src" / "a.ts")
	js = _touch(tmp_path / "src" / "a.js")
	assert resolve_module_path("./a", importer, str(tmp_path)) == js


def test_exact_path_wins_over_extensions(tmp_path):
	importer = _touch(tmp_path / "main.ts")
	_touch(tmp_path / "b.ts.js")
	exact = _touch(tmp_path / "b.ts")
	assert resolve_module_path("./b.ts", importer, str(tmp_path)) == exact


def test_file_wins_over_directory_index(tmp_path):
	importer = _touch(tmp_path / "x.ts")
	_touch(tmp_path / "shared" / "lib" / "index.ts")
	lib = _touch(tmp_path / "shared" / "lib.tsx")
	assert resolve_module_path("./shared/lib", importer, str(tmp_path)) == lib


def test_directory_index_fallback_order(tmp_path):
	importer = _touch(tmp_path / "x.ts")
	_touch(tmp_path / "shared" / "lib" / "index.ts")
	assert resolve_module_path("./shared/lib", importer, str(tmp_path)) == str(
		tmp_path / "shared" / "lib" / "index.ts"
	)
	js = _touch(tmp_path / "shared" / "lib" / "index.js")
	assert resolve_module_path("./shared/lib", importer, str(tmp_path)) == js


def test_parent_and_root_relative_paths(tmp_path):
	importer = _touch(tmp_path / "src" / "deep" / "a.ts")
	util = _touch(tmp_path / "src" / "util.ts")
	assert resolve_module_path("../util", importer, str(tmp_path)) == util
	assert resolve_module_path("/src/util", importer, str(tmp_path)) == util


def test_external_and_missing_modules(tmp_path):
	importer = _touch(tmp_path / "a.ts")
	(tmp_path / "lodash.ts").write_text("")
	(tmp_path / "empty").mkdir()
	assert resolve_module_path("lodash", importer, str(tmp_path)) is None
	assert resolve_module_path("@scope/pkg", importer, str(tmp_path)) is None
	assert resolve_module_path("./missing", importer, str(tmp_path)) is None
	assert resolve_module_path("./empty", importer, str(tmp_path)) is None


def test_python_sibling_module(tmp_path):
	importer = _touch(tmp_path / "pkg" / "mod.py")
	utils = _touch(tmp_path / "pkg" / "utils.py")
	assert resolve_python_module("utils", importer, str(tmp_path)) == utils


def test_python_module_file_before_package(tmp_path):
	importer = _touch(tmp_path / "main.py")
	init = _touch(tmp_path / "pkg" / "__init__.py")
	assert resolve_python_module("pkg", importer, str(tmp_path)) == init
	single = _touch(tmp_path / "pkg.py")
	assert resolve_python_module("pkg", importer, str(tmp_path)) == single


def test_python_falls_back_to_workspace_root(tmp_path):
	importer = _touch(tmp_path / "pkg" / "mod.py")
	common = _touch(tmp_path / "common.py")
	assert resolve_python_module("common", importer, str(tmp_path)) == common


def test_python_relative_imports(tmp_path):
	importer = _touch(tmp_path / "pkg" / "sub" / "mod.py")
	sibling = _touch(tmp_path / "pkg" / "sub" / "sibling.py")
	parent = _touch(tmp_path / "pkg" / "common.py")
	init = _touch(tmp_path / "pkg" / "sub" / "__init__.py")
	assert resolve_python_module(".sibling", importer, str(tmp_path)) == sibling
	assert resolve_python_module("..common", importer, str(tmp_path)) == parent
	assert resolve_python_module(".", importer, str(tmp_path)) == init


def test_python_stdlib_and_paths_are_unresolved(tmp_path):
	importer = _touch(tmp_path / "mod.py")
	assert resolve_python_module("os", importer, str(tmp_path)) is None
	assert resolve_python_module("a/b", importer, str(tmp_path)) is None
	assert resolve_python_module("", importer, str(tmp_path)) is None


def test_resolved_paths_exist(tmp_path):
	importer = _touch(tmp_path / "a.ts")
	_touch(tmp_path / "b.mjs")
	resolved = resolve_module_path("./b", importer, str(tmp_path))
	assert resolved is not None and os.path.isfile(resolved)
