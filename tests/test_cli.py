"""Tests for the canonpath command line tool."""

import json

from canonpath.cli import main
from canonpath.core import cwd as cwd_module


def lines(result):
    return result.output.splitlines()


class TestCanon:
    def test_canonicalizes_each_argument(self, runner):
        result = runner.invoke(main, ["canon", "/foo/bar/boo/bim/../../fim", "", "a//b/"])
        assert result.exit_code == 0
        assert lines(result) == ["/foo/bar/fim", ".", "a/b/"]

    def test_json(self, runner):
        result = runner.invoke(main, ["--format", "json", "canon", "/a/./b"])
        assert result.exit_code == 0
        assert json.loads(result.output) == [{"input": "/a/./b", "canonical": "/a/b"}]

    def test_json_from_environment(self, runner, monkeypatch):
        monkeypatch.setenv("CANONPATH_FORMAT", "json")
        result = runner.invoke(main, ["canon", "x/.."])
        assert json.loads(result.output) == [{"input": "x/..", "canonical": "."}]

    def test_invalid_format_in_environment(self, runner, monkeypatch):
        monkeypatch.setenv("CANONPATH_FORMAT", "yaml")
        result = runner.invoke(main, ["canon", "a"])
        assert result.exit_code == 2

    def test_requires_paths(self, runner):
        result = runner.invoke(main, ["canon"])
        assert result.exit_code == 2


class TestCheck:
    def test_all_canonical(self, runner):
        result = runner.invoke(main, ["check", "/a/b", "../c/"])
        assert result.exit_code == 0
        assert lines(result) == ["[✓] /a/b", "[✓] ../c/"]

    def test_reports_non_canonical(self, runner):
        result = runner.invoke(main, ["check", "/a/b", "a/./b"])
        assert result.exit_code == 1
        assert "[x] a/./b (canonical: a/b)" in result.output

    def test_json(self, runner):
        result = runner.invoke(main, ["-f", "json", "check", "a//b"])
        assert result.exit_code == 1
        assert json.loads(result.output) == [{"input": "a//b", "canonical": False}]


class TestParent:
    def test_single_level(self, runner):
        result = runner.invoke(main, ["parent", "/foo/bar/fim"])
        assert result.exit_code == 0
        assert lines(result) == ["/foo/bar/"]

    def test_levels(self, runner):
        result = runner.invoke(main, ["parent", "-n", "3", ""])
        assert lines(result) == ["../../../"]

    def test_stays_at_root(self, runner):
        result = runner.invoke(main, ["parent", "--levels", "4", "/foo/bar/fim"])
        assert lines(result) == ["/"]

    def test_zero_levels(self, runner):
        result = runner.invoke(main, ["parent", "-n", "0", "a/./b"])
        assert lines(result) == ["a/b"]

    def test_negative_levels_rejected(self, runner):
        result = runner.invoke(main, ["parent", "-n", "-1", "a"])
        assert result.exit_code == 2


class TestJoin:
    def test_join(self, runner):
        result = runner.invoke(main, ["join", "/foo/bar/bim/bing", "../../boo"])
        assert result.exit_code == 0
        assert lines(result) == ["/foo/bar/boo"]

    def test_join_many(self, runner):
        result = runner.invoke(main, ["join", "/srv/www", "../logs", "app.log"])
        assert lines(result) == ["/srv/logs/app.log"]

    def test_json(self, runner):
        result = runner.invoke(main, ["--format", "json", "join", "a", "b/"])
        assert json.loads(result.output) == [{"input": "a", "joined": "a/b/"}]


class TestRelative:
    def test_descendant(self, runner):
        result = runner.invoke(main, ["relative", "/bim/bar/foo", "/bim"])
        assert result.exit_code == 0
        assert lines(result) == ["bar/foo"]

    def test_not_a_descendant(self, runner):
        result = runner.invoke(main, ["relative", "/bim", "/bim/bar/foo"])
        assert result.exit_code == 1
        assert "[x] /bim is not inside /bim/bar/foo" in result.output

    def test_json_not_a_descendant(self, runner):
        result = runner.invoke(main, ["-f", "json", "relative", "/a", "/b"])
        assert result.exit_code == 1
        assert json.loads(result.output) == {"input": "/a", "parent": "/b", "relative": None}


class TestCommon:
    def test_common(self, runner):
        result = runner.invoke(main, ["common", "/a/b/c", "/a/b/d/e", "/a/b/f"])
        assert result.exit_code == 0
        assert lines(result) == ["/a/b/"]

    def test_mixed_absoluteness(self, runner):
        result = runner.invoke(main, ["common", "/a/b", "a/b"])
        assert lines(result) == ["/"]

    def test_needs_two_paths(self, runner):
        result = runner.invoke(main, ["common", "/a"])
        assert result.exit_code == 2

    def test_json(self, runner):
        result = runner.invoke(main, ["-f", "json", "common", "/a/x", "/a/y"])
        assert json.loads(result.output) == {"inputs": ["/a/x", "/a/y"], "common": "/a/"}


class TestAbsolute:
    def test_with_cwd_option(self, runner):
        result = runner.invoke(main, ["--cwd", "/srv/app", "absolute", "logs/../static", "/etc"])
        assert result.exit_code == 0
        assert lines(result) == ["/srv/app/static", "/etc"]

    def test_with_cwd_environment(self, runner, monkeypatch):
        monkeypatch.setenv("CANONPATH_CWD", "/opt")
        result = runner.invoke(main, ["absolute", "../x/"])
        assert lines(result) == ["/x/"]

    def test_process_directory(self, runner, monkeypatch):
        monkeypatch.setattr(cwd_module.os, "getcwd", lambda: "/home/user")
        result = runner.invoke(main, ["absolute", "notes.txt"])
        assert lines(result) == ["/home/user/notes.txt"]

    def test_missing_working_directory(self, runner, monkeypatch):
        def removed():
            raise FileNotFoundError(2, "No such file or directory")

        monkeypatch.setattr(cwd_module.os, "getcwd", removed)
        result = runner.invoke(main, ["absolute", "notes.txt"])
        assert result.exit_code == 1
        assert "Cannot determine working directory" in result.output

    def test_relative_cwd_option(self, runner):
        result = runner.invoke(main, ["--cwd", "srv", "absolute", "a"])
        assert result.exit_code == 1
        assert "Unexpected error" in result.output


class TestSort:
    def test_sort_stdin(self, runner):
        source = "b\n/b\n/a/c\n\n/a/\n../x\n/\n"
        result = runner.invoke(main, ["sort"], input=source)
        assert result.exit_code == 0
        assert lines(result) == ["/", "/a/", "/a/c", "/b", "../x", "b"]

    def test_sort_unique(self, runner):
        source = "a/b\na/./b\na//b\r\n/a\n"
        result = runner.invoke(main, ["sort", "--unique"], input=source)
        assert lines(result) == ["/a", "a/b"]

    def test_sort_keeps_duplicates(self, runner):
        result = runner.invoke(main, ["sort", "-"], input="a\n./a\n")
        assert lines(result) == ["a", "a"]

    def test_sort_file(self, runner, tmp_path):
        listing = tmp_path / "paths.txt"
        listing.write_text("/z\n/a/b/../c\n")
        result = runner.invoke(main, ["-f", "json", "sort", str(listing)])
        assert json.loads(result.output) == ["/a/c", "/z"]


class TestDebug:
    def test_debug_flag(self, runner, monkeypatch):
        monkeypatch.setattr(cwd_module.os, "getcwd", lambda: "/w")
        result = runner.invoke(main, ["--debug", "absolute", "a"])
        assert result.exit_code == 0
        assert "/w/a" in result.output
