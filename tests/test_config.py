import contextlib
import io
import os
import tempfile
import unittest

from scaled.config.config import load_config, validate_config


class LoadConfigTests(unittest.TestCase):
    def test_package_defaults(self) -> None:
        cfg = load_config()
        self.assertEqual(cfg["tuning"]["root"], "e")
        self.assertIs(cfg["tuning"]["drop"], False)
        self.assertEqual(cfg["display"]["frets"], 12)
        self.assertIs(cfg["explain"], False)

    def test_user_file(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            path = os.path.join(tmp, "scaled.yml")
            with open(path, "w", encoding="utf-8") as f:
                f.write("tuning:\n  root: D\n  drop: true\n")
            cfg = load_config(path)
        self.assertEqual(cfg, {"tuning": {"root": "D", "drop": True}})

    def test_missing_file_exits(self) -> None:
        err = io.StringIO()
        with contextlib.redirect_stderr(err), self.assertRaises(SystemExit) as ctx:
            load_config("/nonexistent/scaled.yml")
        self.assertEqual(ctx.exception.code, 1)
        self.assertIn("Config file not found", err.getvalue())

    def test_non_mapping_exits(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            path = os.path.join(tmp, "list.yml")
            with open(path, "w", encoding="utf-8") as f:
                f.write("- a\n- b\n")
            with contextlib.redirect_stderr(io.StringIO()), self.assertRaises(SystemExit):
                load_config(path)


class ValidateConfigTests(unittest.TestCase):
    def test_empty_gets_defaults(self) -> None:
        cfg = validate_config({})
        self.assertEqual(cfg["tuning"], {"root": "e", "drop": False})
        self.assertEqual(cfg["display"], {"frets": 12})
        self.assertIs(cfg["explain"], False)

    def test_bad_values_fall_back(self) -> None:
        out = io.StringIO()
        with contextlib.redirect_stdout(out):
            cfg = validate_config(
                {"tuning": {"root": "H", "drop": "yes"}, "display": {"frets": 99}, "explain": 1}
            )
        self.assertEqual(cfg["tuning"], {"root": "e", "drop": False})
        self.assertEqual(cfg["display"]["frets"], 12)
        self.assertIs(cfg["explain"], False)
        self.assertEqual(out.getvalue().count("WARNING:"), 4)

    def test_bool_frets_rejected(self) -> None:
        with contextlib.redirect_stdout(io.StringIO()):
            cfg = validate_config({"display": {"frets": True}})
        self.assertEqual(cfg["display"]["frets"], 12)

    def test_section_not_mapping(self) -> None:
        out = io.StringIO()
        with contextlib.redirect_stdout(out):
            cfg = validate_config({"tuning": "drop d"})
        self.assertEqual(cfg["tuning"]["root"], "e")
        self.assertIn("WARNING:", out.getvalue())

    def test_valid_values_kept(self) -> None:
        cfg = validate_config({"tuning": {"root": "C#", "drop": True}, "display": {"frets": 15}})
        self.assertEqual(cfg["tuning"], {"root": "C#", "drop": True})
        self.assertEqual(cfg["display"]["frets"], 15)


if __name__ == "__main__":
    unittest.main()
