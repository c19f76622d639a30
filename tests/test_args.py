"""
Tests for command-line parsing.
"""

import unittest
from pathlib import Path

from tsrouter_lib.args import build_config, parse_args
from tsrouter_lib.config import TEMPLATE_DIR, RouterConfig, SetupOptions
from tsrouter_lib.errors import (
    HelpRequested,
    InvalidFormat,
    MissingOptionValue,
    NonNumericContainerId,
    PrefixOutOfRange,
    UnknownOption,
    UnresolvedTarget,
)


def config_for(argv):
    return build_config(parse_args(argv))


class TestParseArgs(unittest.TestCase):

    def test_short_flags(self):
        config, _ = config_for(["-c", "102", "-s", "192.168.1.0/24"])
        self.assertEqual(config, RouterConfig(container_id=102, target="192.168.1.0/24", auto_detect=False))

    def test_long_flags(self):
        config, _ = config_for(["--container", "102", "--subnet", "192.168.1.0/24"])
        self.assertEqual(config.container_id, 102)
        self.assertEqual(config.target, "192.168.1.0/24")

    def test_ipaddr_alias(self):
        for flag in ("-i", "--ipaddr"):
            config, _ = config_for([flag, "10.0.0.0/8"])
            self.assertEqual(config.target, "10.0.0.0/8")
            self.assertFalse(config.auto_detect)

    def test_bare_ip_normalized(self):
        config, _ = config_for(["--subnet", "192.168.129.59"])
        self.assertEqual(config.target, "192.168.129.59/32")

    def test_equals_form(self):
        config, _ = config_for(["--container=105", "--subnet=10.1.0.0/16"])
        self.assertEqual(config.container_id, 105)
        self.assertEqual(config.target, "10.1.0.0/16")

    def test_defaults(self):
        config, options = config_for([])
        self.assertEqual(config, RouterConfig(container_id=100, target=None, auto_detect=True))
        self.assertEqual(options, SetupOptions(bridge="vmbr0", dry_run=False, assume_yes=False,
                                               template_dir=TEMPLATE_DIR))

    def test_setup_options(self):
        _, options = config_for(["-b", "vmbr1", "--dry-run", "-y", "--template-dir", "/tmp/tpl"])
        self.assertEqual(options.bridge, "vmbr1")
        self.assertTrue(options.dry_run)
        self.assertTrue(options.assume_yes)
        self.assertEqual(options.template_dir, Path("/tmp/tpl"))

    def test_last_occurrence_wins(self):
        config, _ = config_for(["-c", "101", "-c", "102", "-s", "10.0.0.0/8", "-i", "192.168.0.0/16"])
        self.assertEqual(config.container_id, 102)
        self.assertEqual(config.target, "192.168.0.0/16")

    def test_non_numeric_container(self):
        with self.assertRaises(NonNumericContainerId):
            config_for(["--container", "abc"])

    def test_prefix_out_of_range(self):
        with self.assertRaises(PrefixOutOfRange):
            config_for(["--subnet", "10.0.0.0/40"])

    def test_subnet_with_trailing_newline(self):
        with self.assertRaises(InvalidFormat):
            config_for(["-s", "10.0.0.0/24\n"])

    def test_container_with_trailing_newline(self):
        with self.assertRaises(NonNumericContainerId):
            config_for(["-c", "100\n"])

    def test_empty_subnet_disables_auto_detect(self):
        with self.assertRaises(UnresolvedTarget):
            config_for(["--subnet", ""])


class TestHelp(unittest.TestCase):

    def test_help_anywhere(self):
        for argv in (["-h"], ["--help"], ["-c", "abc", "--help"],
                     ["--bogus", "-h"], ["-h", "--bogus"], ["-s", "10.0.0.0/40", "-h"]):
            with self.assertRaises(HelpRequested, msg=argv):
                parse_args(argv)

    def test_usage_lists_options(self):
        with self.assertRaises(HelpRequested) as ctx:
            parse_args(["--help"])
        usage = ctx.exception.usage
        for flag in ("--container", "--subnet", "--ipaddr", "--help", "-c", "-s", "-i"):
            self.assertIn(flag, usage)
        self.assertIn("auto-detect", usage)


class TestUsageErrors(unittest.TestCase):

    def test_unknown_option(self):
        with self.assertRaises(UnknownOption) as ctx:
            parse_args(["-c", "102", "--bogus"])
        self.assertEqual(ctx.exception.option, "--bogus")

    def test_unknown_option_before_valid_ones(self):
        with self.assertRaises(UnknownOption):
            parse_args(["--bogus", "-c", "102"])

    def test_positional_token(self):
        with self.assertRaises(UnknownOption) as ctx:
            parse_args(["-c", "102", "extra"])
        self.assertEqual(ctx.exception.option, "extra")

    def test_abbreviation_rejected(self):
        with self.assertRaises(UnknownOption) as ctx:
            parse_args(["--cont", "102"])
        self.assertEqual(ctx.exception.option, "--cont")

    def test_missing_value(self):
        for argv in (["-c"], ["--subnet"], ["-i"], ["-s", "-c", "102"]):
            with self.assertRaises(MissingOptionValue, msg=argv):
                parse_args(argv)

    def test_missing_value_names_option(self):
        with self.assertRaises(MissingOptionValue) as ctx:
            parse_args(["--container"])
        self.assertIn("--container", ctx.exception.option)


if __name__ == "__main__":
    unittest.main()
