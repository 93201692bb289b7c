# SPDX-FileCopyrightText: 2025-2026 Jiri Vyskocil <jiri@vyskocil.com>
#
# SPDX-License-Identifier: Apache-2.0

import subprocess
import unittest
import unittest.mock

from dotkit.lib._util.ansi import ask_yes_no, color, supports_color
from dotkit.lib._util.process import run_tool, tool_available
from test_utils import dotkit_env


class RunToolTests(unittest.TestCase):
    @unittest.mock.patch("dotkit.lib._util.process.subprocess.run")
    def test_passes_options_through(self, run_mock) -> None:
        run_mock.return_value = subprocess.CompletedProcess(["ls"], 0, stdout="x", stderr="")
        with dotkit_env():
            result = run_tool(["ls", "-la"], capture=True, input="", timeout=3)
        self.assertEqual(result.stdout, "x")
        run_mock.assert_called_once_with(
            ["ls", "-la"],
            capture_output=True,
            check=True,
            input="",
            text=True,
            timeout=3,
            cwd=None,
        )

    @unittest.mock.patch(
        "dotkit.lib._util.process.subprocess.run", side_effect=FileNotFoundError("zopfli")
    )
    def test_missing_tool(self, run_mock) -> None:
        with dotkit_env(), self.assertRaises(SystemExit) as ctx:
            run_tool(["zopfli", "-v", "x.tar"])
        self.assertEqual(str(ctx.exception), "zopfli not found. Please install it first.")

    @unittest.mock.patch(
        "dotkit.lib._util.process.subprocess.run",
        side_effect=subprocess.CalledProcessError(3, ["mongodump"]),
    )
    def test_failure_becomes_system_exit(self, run_mock) -> None:
        with dotkit_env(), self.assertRaises(SystemExit) as ctx:
            run_tool(["mongodump", "--db", "x"])
        self.assertEqual(str(ctx.exception), "mongodump failed (exit status 3)")

    def test_commands_are_logged(self) -> None:
        with dotkit_env() as env, unittest.mock.patch(
            "dotkit.lib._util.process.subprocess.run",
            return_value=subprocess.CompletedProcess(["true"], 0),
        ):
            run_tool(["echo", "hello world"])
            log = (env.state_dir / "dotkit.log").read_text(encoding="utf-8")
        self.assertIn("run: echo 'hello world'", log)

    @unittest.mock.patch("dotkit.lib._util.process.shutil.which")
    def test_tool_available(self, which_mock) -> None:
        which_mock.side_effect = lambda name: "/usr/bin/pigz" if name == "pigz" else None
        self.assertTrue(tool_available("pigz"))
        self.assertFalse(tool_available("zopfli"))


class AnsiTests(unittest.TestCase):
    def test_no_color_wins(self) -> None:
        with dotkit_env(extra_env={"FORCE_COLOR": "1"}):
            self.assertFalse(supports_color())

    def test_color_disabled_returns_text(self) -> None:
        self.assertEqual(color("x", "31", False), "x")
        self.assertEqual(color("x", "31", True), "\x1b[31mx\x1b[0m")

    def test_ask_yes_no_custom_tokens(self) -> None:
        self.assertTrue(ask_yes_no("? ", accepted=("y",), read=lambda p: "Y"))
        self.assertFalse(ask_yes_no("? ", accepted=("y",), read=lambda p: "yes"))

    def test_ask_yes_no_uses_input(self) -> None:
        with unittest.mock.patch("builtins.input", return_value="yes") as input_mock:
            self.assertTrue(ask_yes_no("Continue? "))
        input_mock.assert_called_once_with("Continue? ")
