import io
import json
import sys
import tempfile
import unittest
from contextlib import redirect_stderr, redirect_stdout
from pathlib import Path
from unittest.mock import patch

PROJECT_ROOT = Path(__file__).resolve().parents[1]
TESTS_DIR = Path(__file__).resolve().parent
for _path in (PROJECT_ROOT, TESTS_DIR):
    if str(_path) not in sys.path:
        sys.path.insert(0, str(_path))

from resume_insight import cli  # noqa: E402
from sample_documents import make_docx  # noqa: E402


class CliTests(unittest.TestCase):
    def setUp(self):
        self._tmp = tempfile.TemporaryDirectory()
        self.tmp_dir = Path(self._tmp.name)

    def tearDown(self):
        self._tmp.cleanup()

    def run_cli(self, *argv):
        out, err = io.StringIO(), io.StringIO()
        with redirect_stdout(out), redirect_stderr(err):
            code = cli.main(list(argv))
        return code, out.getvalue(), err.getvalue()

    def test_analyze_prints_heuristic_analysis_json(self):
        resume = self.tmp_dir / "resume.docx"
        resume.write_bytes(make_docx())

        code, out, _ = self.run_cli("analyze", str(resume), "--heuristic-only")

        self.assertEqual(code, 0)
        payload = json.loads(out)
        self.assertIn("python", payload["skills"])
        self.assertEqual(payload["contact"]["email"], "jane@example.com")
        self.assertEqual(payload["source"], "heuristic")

    def test_analyze_unreadable_file_exits_with_error(self):
        resume = self.tmp_dir / "resume.pdf"
        resume.write_bytes(b"not a pdf")

        code, out, err = self.run_cli("analyze", str(resume), "--heuristic-only")

        self.assertEqual(code, 1)
        self.assertEqual(out, "")
        self.assertIn("Analysis failed", err)

    def test_suggest_without_api_key_exits_with_error(self):
        resume = self.tmp_dir / "resume.docx"
        resume.write_bytes(make_docx())

        with patch.object(cli, "get_text_generator", return_value=None):
            code, _, err = self.run_cli("suggest", str(resume))

        self.assertEqual(code, 1)
        self.assertIn("OPENAI_API_KEY", err)


if __name__ == "__main__":
    unittest.main()
