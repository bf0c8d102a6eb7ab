# -*- coding: utf-8 -*-
"""
CLI tests

Drives cad_organizer.cli.main end to end on temporary folders.
"""

import io
import os
import shutil
import tempfile
import unittest
from pathlib import Path
from unittest.mock import patch

import sys
sys.path.insert(0, str(Path(__file__).parent.parent))

from cad_organizer import cli
from cad_organizer.exceptions import ReportError
from cad_organizer.logger import AppLogger
from cad_organizer.models import Mode


class TestBuildParser(unittest.TestCase):
    """Argument parsing"""

    def setUp(self):
        self.parser = cli.build_parser()

    def test_mode_defaults_to_move(self):
        args = self.parser.parse_args(["src", "dst"])
        self.assertIs(args.mode, Mode.MOVE)
        self.assertEqual(args.source, Path("src"))
        self.assertEqual(args.destination, Path("dst"))
        self.assertFalse(args.no_report)

    def test_mode_is_case_insensitive(self):
        self.assertIs(self.parser.parse_args(["src", "dst", "copy"]).mode, Mode.COPY)
        self.assertIs(self.parser.parse_args(["src", "dst", "Move"]).mode, Mode.MOVE)

    def test_invalid_mode_is_rejected(self):
        with patch("sys.stderr", new_callable=io.StringIO) as err:
            with self.assertRaises(SystemExit) as ctx:
                self.parser.parse_args(["src", "dst", "delete"])
        self.assertEqual(ctx.exception.code, 2)
        self.assertIn("Invalid mode", err.getvalue())

    def test_missing_arguments(self):
        with patch("sys.stderr", new_callable=io.StringIO):
            with self.assertRaises(SystemExit):
                self.parser.parse_args(["src"])

    def test_log_level_is_upper_cased(self):
        args = self.parser.parse_args(["src", "dst", "--log-level", "debug"])
        self.assertEqual(args.log_level, "DEBUG")


class TestMain(unittest.TestCase):
    """main() end to end"""

    def setUp(self):
        self.test_dir = tempfile.mkdtemp()
        self.source_dir = Path(self.test_dir) / "source"
        self.source_dir.mkdir()
        self.dest_root = Path(self.test_dir) / "organized"
        (self.source_dir / "crown_42.stl").write_text("crown", encoding='utf-8')
        (self.source_dir / "scan.stl").write_text("scan", encoding='utf-8')
        (self.source_dir / "pack.7z").write_text("pack", encoding='utf-8')
        (self.source_dir / "subfolder").mkdir()

    def tearDown(self):
        AppLogger.shutdown()
        if os.path.exists(self.test_dir):
            shutil.rmtree(self.test_dir)

    def _main(self, *argv):
        with patch("sys.stdout", new_callable=io.StringIO) as out, \
                patch("sys.stderr", new_callable=io.StringIO):
            code = cli.main([str(a) for a in argv] + ["--log-level", "ERROR"])
        return code, out.getvalue()

    def test_copy_run_writes_report_and_summary(self):
        code, output = self._main(self.source_dir, self.dest_root, "COPY")

        self.assertEqual(code, cli.EXIT_OK)
        self.assertTrue((self.dest_root / "EXOCAD" / "crown_42.stl").exists())
        self.assertTrue((self.dest_root / "STL" / "scan.stl").exists())
        self.assertTrue((self.dest_root / "PACKAGES" / "pack.7z").exists())
        self.assertTrue((self.source_dir / "scan.stl").exists())

        reports = list(self.dest_root.glob("relatorio-organizacao-*.txt"))
        self.assertEqual(len(reports), 1)
        text = reports[0].read_text(encoding='utf-8')
        self.assertIn("[COPY] crown_42.stl -> EXOCAD", text)
        self.assertIn("Skipped  : 1", text)

        self.assertIn("===== SUMMARY =====", output)
        self.assertIn("Processed  : 3", output)
        self.assertIn("Skipped    : 1", output)
        self.assertIn("Errors     : 0", output)
        self.assertIn("Report saved to", output)

    def test_default_mode_moves(self):
        code, _ = self._main(self.source_dir, self.dest_root)

        self.assertEqual(code, cli.EXIT_OK)
        self.assertFalse((self.source_dir / "scan.stl").exists())
        self.assertTrue((self.dest_root / "STL" / "scan.stl").exists())

    def test_no_report(self):
        code, output = self._main(self.source_dir, self.dest_root, "copy", "--no-report")

        self.assertEqual(code, cli.EXIT_OK)
        self.assertEqual(list(self.dest_root.glob("relatorio-organizacao-*.txt")), [])
        self.assertNotIn("Report saved to", output)

    def test_invalid_source_still_prints_summary(self):
        missing = Path(self.test_dir) / "missing"

        code, output = self._main(missing, self.dest_root, "--no-report")

        self.assertEqual(code, cli.EXIT_RUN_ERRORS)
        self.assertIn("Errors     : 1", output)
        self.assertIn("Processed  : 0", output)

    def test_report_failure_is_a_distinct_condition(self):
        failure = ReportError(self.dest_root / "r.txt", OSError("disk full"))

        with patch.object(cli, "write_report", side_effect=failure):
            code, output = self._main(self.source_dir, self.dest_root, "COPY")

        self.assertEqual(code, cli.EXIT_REPORT_FAILED)
        self.assertIn("Report generation failed: disk full", output)
        self.assertIn("Errors     : 0", output)
        self.assertTrue((self.dest_root / "STL" / "scan.stl").exists())

    def test_invalid_mode_does_not_touch_files(self):
        with patch("sys.stderr", new_callable=io.StringIO):
            with self.assertRaises(SystemExit) as ctx:
                cli.main([str(self.source_dir), str(self.dest_root), "shred"])

        self.assertEqual(ctx.exception.code, 2)
        self.assertFalse(self.dest_root.exists())
        self.assertTrue((self.source_dir / "scan.stl").exists())

    def test_log_file_option(self):
        log_file = Path(self.test_dir) / "logs" / "organizer.log"

        with patch("sys.stdout", new_callable=io.StringIO), \
                patch("sys.stderr", new_callable=io.StringIO):
            code = cli.main([
                str(self.source_dir), str(self.dest_root), "COPY",
                "--no-report", "--log-level", "INFO", "--log-file", str(log_file),
            ])
        AppLogger.shutdown()

        self.assertEqual(code, cli.EXIT_OK)
        self.assertIn("[COPY] scan.stl -> STL", log_file.read_text(encoding='utf-8'))

    def test_unwritable_log_file_is_a_configuration_error(self):
        blocker = Path(self.test_dir) / "blocker"
        blocker.write_text("i am a file", encoding='utf-8')

        code, output = self._main(
            self.source_dir, self.dest_root, "COPY", "--log-file", blocker / "run.log"
        )

        self.assertEqual(code, cli.EXIT_RUN_ERRORS)
        self.assertIn("Configuration error", output)
        self.assertFalse(self.dest_root.exists())

    def test_second_invocation_uses_its_own_log_file(self):
        first_log = Path(self.test_dir) / "first.log"
        second_log = Path(self.test_dir) / "second.log"

        with patch("sys.stdout", new_callable=io.StringIO), \
                patch("sys.stderr", new_callable=io.StringIO):
            cli.main([str(self.source_dir), str(self.dest_root), "COPY", "--no-report",
                      "--log-level", "INFO", "--log-file", str(first_log)])
            cli.main([str(self.source_dir), str(self.dest_root), "COPY", "--no-report",
                      "--log-level", "INFO", "--log-file", str(second_log)])
        AppLogger.shutdown()

        self.assertIn("[COPY] scan.stl -> STL", second_log.read_text(encoding='utf-8'))
        self.assertEqual(first_log.read_text(encoding='utf-8').count("Run started"), 1)


if __name__ == "__main__":
    unittest.main()
