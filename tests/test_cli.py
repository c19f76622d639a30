"""
Tests for the command-line entry point: exit codes and messages.
"""

import io
import subprocess
import unittest
from contextlib import redirect_stdout
from pathlib import Path
from unittest import mock

from tsrouter_lib.cli import main
from tsrouter_lib.config import RouterConfig
from tsrouter_lib.errors import CommandNotFound, ContainerNotFound, NotRoot, StepFailed


def run_main(argv):
    out = io.StringIO()
    with redirect_stdout(out):
        code = main(argv)
    return code, out.getvalue()


class TestMain(unittest.TestCase):

    def setUp(self):
        patcher = mock.patch("tsrouter_lib.cli.run_setup")
        self.run_setup = patcher.start()
        self.addCleanup(patcher.stop)

    def test_help_exits_zero_without_setup(self):
        code, out = run_main(["-c", "102", "--help"])
        self.assertEqual(code, 0)
        self.assertIn("usage: setup-tailscale-subnet-router", out)
        self.run_setup.assert_not_called()

    def test_unknown_option(self):
        code, out = run_main(["--bogus"])
        self.assertEqual(code, 1)
        self.assertIn("Unknown option --bogus", out)
        self.assertIn("Use --help for usage information", out)
        self.run_setup.assert_not_called()

    def test_missing_value(self):
        code, out = run_main(["--container"])
        self.assertEqual(code, 1)
        self.assertIn("requires a value", out)

    def test_non_numeric_container(self):
        code, out = run_main(["-c", "abc"])
        self.assertEqual(code, 1)
        self.assertIn("Container ID must be numeric", out)
        self.run_setup.assert_not_called()

    def test_invalid_subnet_stops_before_setup(self):
        for subnet in ("10.0.0.0/40", "192.168.1.300/24", "192.168.1.0/24/extra"):
            code, out = run_main(["-s", subnet])
            self.assertEqual(code, 1, subnet)
            self.assertIn("Invalid subnet format", out)
        self.run_setup.assert_not_called()

    def test_single_ip_converted(self):
        code, out = run_main(["-c", "102", "-s", "192.168.1.10"])
        self.assertEqual(code, 0)
        self.assertIn("192.168.1.10 -> 192.168.1.10/32", out)
        config, options = self.run_setup.call_args[0]
        self.assertEqual(config, RouterConfig(container_id=102, target="192.168.1.10/32", auto_detect=False))
        self.assertEqual(options.bridge, "vmbr0")

    def test_defaults_use_auto_detect(self):
        code, _ = run_main([])
        self.assertEqual(code, 0)
        config, _ = self.run_setup.call_args[0]
        self.assertEqual(config, RouterConfig(container_id=100, target=None, auto_detect=True))

    def test_preflight_errors(self):
        for exc in (NotRoot(), ContainerNotFound(100)):
            self.run_setup.side_effect = exc
            code, out = run_main([])
            self.assertEqual(code, 1)
            self.assertIn(str(exc), out)

    def test_failure_after_backup(self):
        self.run_setup.side_effect = StepFailed(5, "exit status 1: pct stop 100",
                                                Path("/etc/pve/lxc/100.conf.backup"))
        code, out = run_main(["-c", "100", "-s", "10.0.0.0/8"])
        self.assertEqual(code, 1)
        self.assertIn("Step 5 failed: exit status 1: pct stop 100", out)
        self.assertIn("LXC config backup: /etc/pve/lxc/100.conf.backup", out)

    def test_failure_before_backup(self):
        self.run_setup.side_effect = StepFailed(1, "exit status 7: pct exec 100 -- bash")
        code, out = run_main(["-c", "100", "-s", "10.0.0.0/8"])
        self.assertEqual(code, 1)
        self.assertIn("Step 1 failed", out)
        self.assertNotIn("backup", out)
        self.assertIn("the LXC config was not modified", out)

    def test_preflight_command_failure(self):
        self.run_setup.side_effect = subprocess.CalledProcessError(1, ["pct", "start", "100"])
        code, out = run_main([])
        self.assertEqual(code, 1)
        self.assertIn("Command failed with exit status 1: pct start 100", out)
        self.assertNotIn("backup", out)

    def test_pct_not_installed(self):
        self.run_setup.side_effect = CommandNotFound("pct")
        code, out = run_main([])
        self.assertEqual(code, 1)
        self.assertIn("Command not found: pct", out)


if __name__ == "__main__":
    unittest.main()
