from __future__ import annotations

import io
import json
import tempfile
import unittest
from contextlib import redirect_stderr, redirect_stdout
from pathlib import Path
import sys

sys.path.insert(0, str(Path(__file__).resolve().parents[2]))

from tui_dashboard.app import main  # noqa: E402


def run(argv: list[str]) -> tuple[int, str]:
    out = io.StringIO()
    with redirect_stdout(out):
        code = main(argv)
    return code, out.getvalue()


class AppTests(unittest.TestCase):
    def test_json_blank_profile(self):
        code, output = run(["--profile", "blank", "--json", "--width", "100", "--height", "40"])
        self.assertEqual(code, 0)
        payload = json.loads(output)
        self.assertEqual(payload["profile"], "blank")
        self.assertEqual(payload["layout_mode"], "medium")
        self.assertEqual(payload["regions"]["table"]["height"], 2)
        self.assertEqual(payload["regions"]["avatar"]["width"], 0)
        self.assertIsNone(payload["selected"])

    def test_json_select_override(self):
        code, output = run(["--profile", "demo", "--json", "--select", "3", "--width", "80", "--height", "30"])
        payload = json.loads(output)
        self.assertEqual(code, 0)
        self.assertEqual(payload["selected"], 3)
        self.assertEqual(payload["regions"]["table"]["height"], 6)
        self.assertEqual(payload["content"]["table"][3], {"label": "Quit", "value": "q"})

    def test_prints_frame(self):
        with tempfile.TemporaryDirectory() as tmp:
            cfg = Path(tmp) / "cfg.json"
            cfg.write_text(json.dumps({"subtitle": "v1", "table": [["start", "s"]], "selected": 0}))
            code, output = run(["--config", str(cfg), "--width", "60", "--height", "40"])
        self.assertEqual(code, 0)
        self.assertIn("v1", output)
        self.assertIn("start", output)

    def test_bad_config_exits_with_usage_error(self):
        with tempfile.TemporaryDirectory() as tmp:
            err = io.StringIO()
            with redirect_stderr(err), self.assertRaises(SystemExit) as ctx:
                main(["--config", str(Path(tmp) / "absent.json")])
        self.assertEqual(ctx.exception.code, 2)
        self.assertIn("config path not found", err.getvalue())

    def test_bad_border_style_exits_with_usage_error(self):
        with tempfile.TemporaryDirectory() as tmp:
            cfg = Path(tmp) / "cfg.json"
            cfg.write_text(json.dumps({"table_border": {"style": "notacolor"}}))
            err = io.StringIO()
            with redirect_stderr(err), self.assertRaises(SystemExit) as ctx:
                main(["--config", str(cfg), "--json"])
        self.assertEqual(ctx.exception.code, 2)
        self.assertIn("invalid border style", err.getvalue())


if __name__ == "__main__":
    unittest.main()
