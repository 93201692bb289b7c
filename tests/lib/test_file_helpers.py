# SPDX-FileCopyrightText: 2025-2026 Jiri Vyskocil <jiri@vyskocil.com>
#
# SPDX-License-Identifier: Apache-2.0

import base64
import gzip
import unittest

from dotkit.lib.tools.files import (
    TREE_IGNORE,
    GzipRatio,
    data_url,
    disk_usage,
    gzip_ratio,
    show_tree,
)
from test_utils import FakeRunner, dotkit_env


class DataUrlTests(unittest.TestCase):
    def test_text_files_get_utf8_charset(self) -> None:
        with dotkit_env() as env:
            path = env.base / "hello.txt"
            path.write_text("hi there", encoding="utf-8")
            runner = FakeRunner({("file",): (0, "text/plain\n")})

            url = data_url(path, runner=runner)

        payload = base64.b64encode(b"hi there").decode("ascii")
        self.assertEqual(url, f"data:text/plain;charset=utf-8;base64,{payload}")
        self.assertEqual(runner.calls, [["file", "-b", "--mime-type", str(path)]])

    def test_binary_files_keep_plain_mime(self) -> None:
        with dotkit_env() as env:
            path = env.base / "dot.png"
            path.write_bytes(b"\x89PNG\r\n")
            runner = FakeRunner({("file",): (0, "image/png\n")})

            url = data_url(path, runner=runner)

        self.assertTrue(url.startswith("data:image/png;base64,"))

    def test_missing_file(self) -> None:
        runner = FakeRunner()
        with dotkit_env() as env:
            with self.assertRaises(SystemExit) as ctx:
                data_url(env.base / "missing.txt", runner=runner)
        self.assertIn("ERROR: Path not found", str(ctx.exception))
        self.assertEqual(runner.calls, [])


class GzipRatioTests(unittest.TestCase):
    def test_reports_sizes_and_ratio(self) -> None:
        with dotkit_env() as env:
            path = env.base / "data.txt"
            path.write_bytes(b"a" * 1000)
            runner = FakeRunner({("gzip",): (0, b"z" * 25)})

            ratio = gzip_ratio(path, runner=runner)

        self.assertEqual(ratio, GzipRatio(1000, 25))
        self.assertEqual(ratio.format(), "orig: 1000 bytes\ngzip: 25 bytes (2.50%)")
        self.assertEqual(runner.calls, [["gzip", "-c", str(path)]])

    def test_empty_file_has_no_ratio(self) -> None:
        ratio = GzipRatio(0, 20)
        self.assertIsNone(ratio.percent)
        self.assertEqual(ratio.format(), "orig: 0 bytes\ngzip: 20 bytes")

    def test_real_gzip_output_is_measured_in_bytes(self) -> None:
        compressed = gzip.compress(b"hello world" * 50)
        with dotkit_env() as env:
            path = env.base / "hello.txt"
            path.write_bytes(b"hello world" * 50)
            ratio = gzip_ratio(path, runner=FakeRunner({("gzip",): (0, compressed)}))
        self.assertEqual(ratio.compressed, len(compressed))


class DiskUsageTests(unittest.TestCase):
    def test_gnu_du_uses_apparent_size(self) -> None:
        runner = FakeRunner({("du", "-b"): (0, "0\t/dev/null\n")})
        with dotkit_env():
            disk_usage(["src", "docs"], runner=runner)
        self.assertEqual(runner.calls[-1], ["du", "-sbh", "--", "src", "docs"])

    def test_bsd_du_fallback(self) -> None:
        runner = FakeRunner({("du", "-b"): (1, "")})
        with dotkit_env():
            disk_usage(["src"], runner=runner)
        self.assertEqual(runner.calls[-1], ["du", "-sh", "--", "src"])

    def test_defaults_to_every_entry_including_dotfiles(self) -> None:
        with dotkit_env() as env:
            work = env.base / "work"
            work.mkdir()
            for name in ("b.txt", ".hidden", "a"):
                (work / name).write_text("x", encoding="utf-8")
            runner = FakeRunner()

            disk_usage(cwd=work, runner=runner)

        self.assertEqual(runner.calls[-1], ["du", "-sbh", "--", ".hidden", "a", "b.txt"])
        self.assertEqual(runner.kwargs[-1]["cwd"], work)

    def test_empty_directory_runs_nothing(self) -> None:
        with dotkit_env() as env:
            empty = env.base / "empty"
            empty.mkdir()
            runner = FakeRunner()
            disk_usage(cwd=empty, runner=runner)
        self.assertEqual(runner.calls, [])


class TreeTests(unittest.TestCase):
    def test_tree_command(self) -> None:
        runner = FakeRunner()
        with dotkit_env():
            show_tree(runner=runner)
            show_tree("src", runner=runner)
        self.assertEqual(
            runner.calls,
            [
                ["tree", "-aC", "-I", TREE_IGNORE, "--dirsfirst"],
                ["tree", "-aC", "-I", TREE_IGNORE, "--dirsfirst", "src"],
            ],
        )
        self.assertEqual(TREE_IGNORE, ".git|node_modules|bower_components")
