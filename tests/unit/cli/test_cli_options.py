"""CLI argument parsing and option-merging tests.

Verifies ``--file-colors`` validation, ``--version`` short-circuiting, and how
persisted config defaults combine with command-line flags.
"""

from __future__ import annotations

import argparse
import io
import json
import runpy
import sys
import tempfile
import unittest
from pathlib import Path
from unittest import mock

from zebrals import __version__, cli


class ParseFileColorsTests(unittest.TestCase):
    def test_pairs_are_split_on_commas_and_equals(self) -> None:
        self.assertEqual(
            cli.parse_file_colors(".py=38;5;220m,.html=38;5;208m"),
            {".py": "38;5;220m", ".html": "38;5;208m"},
        )

    def test_pair_without_equals_is_rejected(self) -> None:
        with self.assertRaises(argparse.ArgumentTypeError) as exc_info:
            cli.parse_file_colors(".py=1m,.rs")
        self.assertEqual(str(exc_info.exception), "Invalid format: .rs")

    def test_pair_with_two_equals_is_rejected(self) -> None:
        with self.assertRaises(argparse.ArgumentTypeError):
            cli.parse_file_colors(".py=1m=2m")

    def test_malformed_colors_fail_before_any_listing(self) -> None:
        stderr = io.StringIO()
        with (
            mock.patch("sys.stderr", stderr),
            mock.patch("zebrals.cli.collect_targets") as collect_targets,
        ):
            with self.assertRaises(SystemExit) as exc_info:
                cli.main(["--file-colors", "broken", "."])

        self.assertEqual(exc_info.exception.code, 2)
        self.assertIn("Invalid format: broken", stderr.getvalue())
        collect_targets.assert_not_called()


class ParserTests(unittest.TestCase):
    def test_defaults(self) -> None:
        args = cli.build_parser().parse_args([])
        self.assertEqual(args.paths, ["."])
        self.assertFalse(args.all)
        self.assertFalse(args.icons)
        self.assertIsNone(args.max_name_length)
        self.assertIsNone(args.file_colors)

    def test_short_flags(self) -> None:
        args = cli.build_parser().parse_args(["-a", "-i", "x", "y"])
        self.assertTrue(args.all)
        self.assertTrue(args.icons)
        self.assertEqual(args.paths, ["x", "y"])

    def test_negative_name_length_is_rejected(self) -> None:
        with mock.patch("sys.stderr", io.StringIO()):
            with self.assertRaises(SystemExit):
                cli.build_parser().parse_args(["--max-name-length", "-3"])


class VersionTests(unittest.TestCase):
    def test_version_prints_and_skips_listing(self) -> None:
        stdout = io.StringIO()
        with (
            mock.patch("sys.stdout", stdout),
            mock.patch("zebrals.cli.run_listing") as run_listing,
        ):
            exit_code = cli.main(["-v", "/does/not/matter"])

        self.assertEqual(exit_code, 0)
        self.assertEqual(stdout.getvalue(), f"zebrals {__version__}\n")
        run_listing.assert_not_called()


class ResolveOptionsTests(unittest.TestCase):
    def _resolve(self, config_data: dict[str, object] | None, argv: list[str]) -> cli.ListingOptions:
        with tempfile.TemporaryDirectory() as tmp:
            config_path = Path(tmp) / "config.json"
            if config_data is not None:
                config_path.write_text(json.dumps(config_data), encoding="utf-8")
            with mock.patch("zebrals.config.CONFIG_PATH", config_path):
                return cli.resolve_options(cli.build_parser().parse_args(argv))

    def test_config_supplies_defaults(self) -> None:
        options = self._resolve(
            {
                "show_hidden": True,
                "icons": True,
                "max_name_length": 12,
                "file_colors": {".py": "33m"},
                "theme": "ocean",
            },
            [],
        )
        self.assertTrue(options.show_hidden)
        self.assertTrue(options.show_icons)
        self.assertEqual(options.max_name_length, 12)
        self.assertEqual(options.file_colors, {".py": "33m"})
        self.assertEqual(options.theme_name, "ocean")

    def test_cli_flags_override_config(self) -> None:
        options = self._resolve(
            {"max_name_length": 12, "file_colors": {".py": "33m", ".md": "34m"}, "theme": "ocean"},
            ["--max-name-length", "0", "--file-colors", ".py=31m", "--theme", "plain"],
        )
        self.assertEqual(options.max_name_length, 0)
        self.assertEqual(options.file_colors, {".py": "31m", ".md": "34m"})
        self.assertEqual(options.theme_name, "plain")

    def test_no_config_ignores_file(self) -> None:
        options = self._resolve({"icons": True, "file_colors": {".py": "33m"}}, ["--no-config"])
        self.assertFalse(options.show_icons)
        self.assertEqual(options.file_colors, {})
        self.assertIsNone(options.theme_name)

    def test_missing_config_uses_builtin_defaults(self) -> None:
        options = self._resolve(None, ["a", "b"])
        self.assertEqual(options.paths, ("a", "b"))
        self.assertFalse(options.show_hidden)
        self.assertEqual(options.max_name_length, 0)


class ModuleEntrypointTests(unittest.TestCase):
    def test_package_main_delegates_to_cli(self) -> None:
        import zebrals

        with mock.patch("zebrals.cli.main", return_value=0) as cli_main:
            self.assertEqual(zebrals.main(["--version"]), 0)
        cli_main.assert_called_once_with(["--version"])
        self.assertIn("zebrals", sys.modules)

    def test_python_dash_m_exits_with_cli_status(self) -> None:
        with mock.patch("zebrals.cli.main", return_value=1):
            with self.assertRaises(SystemExit) as exc_info:
                runpy.run_module("zebrals", run_name="__main__")
        self.assertEqual(exc_info.exception.code, 1)


if __name__ == "__main__":
    unittest.main()
