import pytest

from jsusage.fs_scan import detect_language, is_excluded, scan_repository


def test_detect_language():
	assert detect_language("user.ts") == "typescript"
	assert detect_language("types.d.ts") == "typescript"
	assert detect_language("List.vue") == "vue"
	assert detect_language("app.js") == "unknown"
	assert detect_language("View.tsx") == "unknown"


def test_is_excluded():
	assert is_excluded("src/app.config.ts")
	assert is_excluded("src/main.ts")
	assert is_excluded("src/domain/user.ts")
	assert not is_excluded("src/user.ts")


def test_scan_repository_walks_nested_dirs(tmp_path):
	(tmp_path / "b").mkdir()
	(tmp_path / "b" / "deep").mkdir()
	(tmp_path / "a.ts").write_text("")
	(tmp_path / "b" / "c.vue").write_text("")
	(tmp_path / "b" / "deep" / "d.txt").write_text("")

	files = scan_repository(str(tmp_path))
	assert [f.rel_path.replace("\\", "/") for f in files] == ["a.ts", "b/c.vue", "b/deep/d.txt"]
	assert [f.language for f in files] == ["typescript", "vue", "unknown"]


def test_scan_repository_missing_root(tmp_path):
	with pytest.raises(FileNotFoundError):
		scan_repository(str(tmp_path / "nope"))
