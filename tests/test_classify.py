import pytest

from depmap.classify import (
	classify_edge,
	classify_file,
	edge_color,
	edge_style,
	node_stroke_color,
	node_style_class,
)


@pytest.mark.parametrize(
	"rel_path, expected",
	[
		("src/index.ts", "entry"),
		("src/utils/index.cjs", "entry"),
		("lib/index.py", "entry"),
		("pkg/__init__.py", "entry"),
		("src/main/app.ts", "entry"),
		("src/options.ts", "entry"),
		("src/report/summary.ts", "report"),
		("src/tools/run.ts", "tool"),
		("src/cache/store.js", "tool"),
		("src/utils/strings.ts", "config"),
		("src/app-config.ts", "config"),
		("src/extract/parse.ts", "core"),
		("lib/schema.py", "core"),
		("lib/widget.ts", "entry"),
	],
)
def test_classify_file(rel_path, expected):
	assert classify_file(rel_path, rel_path.rsplit("/", 1)[-1]) == expected


def test_classify_file_first_rule_wins():
	# "report" matches before "config" even though both apply
	assert classify_file("src/lib/reporter-config.ts", "reporter-config.ts") == "report"
	# an index file inside a report folder is still an entry point
	assert classify_file("src/report/index.ts", "index.ts") == "entry"


def test_classify_file_ignores_case():
	assert classify_file("SRC/Report/Summary.TS", "Summary.TS") == "report"


@pytest.mark.parametrize(
	"src_cat, dst_cat, src_path, dst_path, expected",
	[
		("config", "core", "a.ts", "b.ts", "indirect"),
		("entry", "entry", "src/cli/run.ts", "b.ts", "indirect"),
		("report", "report", "src/cli/a.ts", "src/report/b.ts", "indirect"),
		("report", "report", "src/report/a.ts", "src/report/b.ts", "internal"),
		("core", "core", "a.ts", "b.ts", "processing"),
		("entry", "entry", "src/extract/a.ts", "lib/b.ts", "processing"),
		("entry", "entry", "a.ts", "src/enrich/b.ts", "processing"),
		("tool", "entry", "a.ts", "b.ts", "utility"),
		("entry", "entry", "src/utils/a.ts", "b.ts", "utility"),
		("entry", "entry", "src/options/a.ts", "b.ts", "special"),
		("entry", "core", "a.ts", "src/resolve/x.ts", "special"),
		("entry", "entry", "a.ts", "b.ts", "normal"),
		("entry", "entry", "a.ts", "src/options/b.ts", "normal"),
	],
)
def test_classify_edge(src_cat, dst_cat, src_path, dst_path, expected):
	assert classify_edge(src_cat, dst_cat, src_path, dst_path) == expected


def test_classify_edge_is_repeatable():
	args = ("tool", "core", "src/tools/a.ts", "src/extract/b.ts")
	assert {classify_edge(*args) for _ in range(5)} == {"processing"}


def test_style_tables_are_total():
	assert edge_style("indirect") == "dashed"
	for kind in ("normal", "processing", "special", "internal", "utility"):
		assert edge_style(kind) == "solid"
	assert edge_color("internal") == "#8B00FF"
	assert edge_color("no-such-kind") == "#0066CC"
	assert node_style_class("core") == "coreStyle"
	assert node_style_class("no-such-category") == "entryStyle"
	assert node_stroke_color("tool") == "#FF6600"
	assert node_stroke_color("no-such-category") == "#666666"
