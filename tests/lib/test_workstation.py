# SPDX-FileCopyrightText: 2025-2026 Jiri Vyskocil <jiri@vyskocil.com>
#
# SPDX-License-Identifier: Apache-2.0

import unittest
import unittest.mock

from dotkit.lib.install.workstation import run_setup
from test_utils import FakeRunner, dotkit_env

INSTALL_URL = "https://example.invalid/install.sh"


class RunSetupTests(unittest.TestCase):
    def test_fresh_mac(self) -> None:
        cfg = f"setup:\n  homebrew_install_url: {INSTALL_URL}\n"
        runner = FakeRunner(
            {
                ("xcode-select", "-p"): (2, ""),
                ("curl",): (0, "echo installing brew\n"),
            }
        )
        with dotkit_env(cfg), unittest.mock.patch("builtins.print"):
            steps = run_setup(platform="darwin", runner=runner, available=lambda name: False)

        self.assertEqual(
            runner.calls,
            [
                ["sudo", "-v"],
                ["xcode-select", "-p"],
                ["xcode-select", "--install"],
                ["curl", "-fsSL", INSTALL_URL],
                ["/bin/bash", "-c", "echo installing brew\n"],
            ],
        )
        self.assertEqual(len(steps), 3)

    def test_skips_installed_tools(self) -> None:
        runner = FakeRunner({("xcode-select", "-p"): (0, "/Library/Developer/CommandLineTools\n")})
        with dotkit_env(), unittest.mock.patch("builtins.print"):
            run_setup(platform="darwin", runner=runner, available=lambda name: name == "brew")

        self.assertEqual(runner.calls, [["sudo", "-v"], ["xcode-select", "-p"]])

    def test_linux_has_no_xcode_step(self) -> None:
        runner = FakeRunner()
        with dotkit_env(), unittest.mock.patch("builtins.print"):
            run_setup(platform="linux", runner=runner, available=lambda name: name == "brew")
        self.assertEqual(runner.calls, [["sudo", "-v"]])

    def test_dry_run_runs_nothing(self) -> None:
        runner = FakeRunner()
        with dotkit_env(), unittest.mock.patch("builtins.print") as print_mock:
            steps = run_setup(
                dry_run=True, platform="darwin", runner=runner, available=lambda name: False
            )

        self.assertEqual(runner.calls, [])
        self.assertEqual(
            steps,
            ["Caching sudo credentials", "Installing Xcode command line tools", "Installing Homebrew"],
        )
        printed = "\n".join(" ".join(map(str, c.args)) for c in print_mock.call_args_list)
        self.assertIn("xcode-select --install", printed)
