"""
Tests for the shownamer command line.
"""

import sys

import pytest

from shownamer import main
from shownamer.shownamer import build_parser
from showname.utils import LogLevel, logger


class TestArguments:

    def test_defaults(self):
        args = build_parser().parse_args(["/media"])

        assert args.root == "/media"
        assert args.name is None
        assert args.season is None
        assert not args.recursive
        assert not args.symlink
        assert not args.no_manifest

    def test_version(self, capsys):
        with pytest.raises(SystemExit) as excinfo:
            main(["--version"])

        assert excinfo.value.code == 0
        assert "shownamer" in capsys.readouterr().out


class TestMain:

    def test_renames_with_overrides(self, tmp_path, touch):
        touch(tmp_path / "[G]Name - 3 [x].avi")

        code = main([str(tmp_path), "--name", "Localized Name", "--season", "1", "--no-confirm"])

        assert code == 0
        assert (tmp_path / "Localized Name - S1E3.avi").exists()
        assert (tmp_path / ".original_names.txt").exists()

    def test_no_manifest(self, tmp_path, touch):
        touch(tmp_path / "[G]Name - 3 [x].avi")

        main([str(tmp_path), "--no-manifest", "--no-confirm"])

        assert not (tmp_path / ".original_names.txt").exists()

    def test_symlink_into_link_dir(self, tmp_path, touch):
        source = touch(tmp_path / "src" / "[G]Show - 1 [x].mkv")
        links = tmp_path / "links"

        code = main([str(tmp_path / "src"), "--symlink", "--link-dir", str(links), "--no-confirm"])

        assert code == 0
        assert source.exists()
        assert (links / "Show - 1.mkv").is_symlink()

    def test_dry_run(self, tmp_path, touch):
        source = touch(tmp_path / "[G]Show - 1 [x].mkv")

        assert main([str(tmp_path), "--dry-run"]) == 0
        assert source.exists()

    def test_missing_root(self, tmp_path, capsys):
        assert main([str(tmp_path / "missing")]) == 2
        assert "startup.error" in capsys.readouterr().out

    def test_failure_exit_code(self, tmp_path, touch, capsys):
        touch(tmp_path / "[G]Show - 1 [x].mkv")
        (tmp_path / "Show - 1.mkv").symlink_to(tmp_path / "elsewhere.mkv")

        assert main([str(tmp_path), "--no-confirm"]) == 1
        assert "Failed to rename" in capsys.readouterr().out

    def test_unparseable_files_do_not_fail(self, tmp_path, touch, capsys):
        touch(tmp_path / "random.mkv")
        touch(tmp_path / "[G]Show - 1 [x].mkv")

        assert main([str(tmp_path), "--no-confirm"]) == 0
        out = capsys.readouterr().out
        assert "rename.parse.skip" in out
        assert "Finished renaming files" in out

    def test_debug_sets_log_level(self, tmp_path):
        main([str(tmp_path), "--debug"])

        assert logger.get_log_level() is LogLevel.DEBUG

    def test_log_file(self, tmp_path, touch, monkeypatch):
        monkeypatch.setattr(sys, "stdout", sys.stdout)
        monkeypatch.setattr(sys, "stderr", sys.stderr)
        touch(tmp_path / "media" / "[G]Show - 1 [x].mkv")
        log_file = tmp_path / "logs" / "run.log"

        main([str(tmp_path / "media"), "--no-confirm", "--log-file", str(log_file)])
        sys.stdout.flush()

        assert "rename.start" in log_file.read_text(encoding="utf-8")
