from __future__ import annotations

import json
import os
import subprocess
import sys
import tempfile
import unittest
from pathlib import Path


class TestClassifyCommandWritesLog(unittest.TestCase):
    def test_classify_creates_run_log_on_config_error(self) -> None:
        repo_root = Path(__file__).resolve().parents[1]

        with tempfile.TemporaryDirectory() as td:
            out_dir = Path(td) / "out"
            feed_path = Path(td) / "feed.json"
            feed_path.write_text("[]", encoding="utf-8")
            missing_cfg = Path(td) / "missing_config.yaml"

            env = dict(os.environ)
            existing_pp = env.get("PYTHONPATH", "")
            env["PYTHONPATH"] = (
                f"{repo_root}{os.pathsep}{existing_pp}" if existing_pp else str(repo_root)
            )

            proc = subprocess.run(
                [
                    sys.executable,
                    "-m",
                    "activity_posts",
                    "classify",
                    "--input",
                    str(feed_path),
                    "--config",
                    str(missing_cfg),
                    "--out",
                    str(out_dir),
                ],
                cwd=repo_root,
                env=env,
                capture_output=True,
                text=True,
            )

            self.assertEqual(proc.returncode, 2, msg=proc.stderr)

            log_path = out_dir / "run.log"
            self.assertTrue(log_path.exists())

            events: list[str] = []
            for ln in log_path.read_text(encoding="utf-8").splitlines():
                if not ln.strip():
                    continue
                ev = json.loads(ln).get("event")
                if isinstance(ev, str):
                    events.append(ev)

            self.assertIn("classify_command_started", events)
            self.assertIn("classify_command_failed", events)
            self.assertNotIn("feed_loaded", events)


if __name__ == "__main__":
    unittest.main()
