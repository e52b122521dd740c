"""
Structured logging for solver runs.

Produces (under an output directory):
  - manifest.json: One-time run metadata (git hash, config, host info)
  - solutions.jsonl: One record per solved system
  - metrics.jsonl: Timing metrics
"""

import json
import hashlib
import platform
import subprocess
import sys
import time
from dataclasses import dataclass, asdict
from pathlib import Path
from typing import Dict, Any


@dataclass
class RunManifest:
    """Run-level metadata, saved once per run."""
    run_id: str
    timestamp: str
    git_commit: str
    config_hash: str
    node_name: str
    python_version: str
    config: Dict[str, Any]

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)

    def save(self, path: Path):
        path = Path(path)
        path.parent.mkdir(parents=True, exist_ok=True)
        with open(path, 'w') as f:
            json.dump(self.to_dict(), f, indent=2, default=str)


def _get_git_commit() -> str:
    """Get current git commit hash, or 'unknown'."""
    try:
        result = subprocess.run(
            ["git", "rev-parse", "HEAD"],
            capture_output=True, text=True, timeout=5,
        )
        return result.stdout.strip() if result.returncode == 0 else "unknown"
    except (OSError, subprocess.SubprocessError):
        return "unknown"


def _config_hash(config: Dict[str, Any]) -> str:
    """Deterministic hash of config dict."""
    s = json.dumps(config, sort_keys=True, default=str)
    return hashlib.sha256(s.encode()).hexdigest()[:16]


def create_manifest(run_id: str, config: Dict[str, Any]) -> RunManifest:
    """Create a RunManifest with auto-detected metadata."""
    return RunManifest(
        run_id=run_id,
        timestamp=time.strftime("%Y-%m-%dT%H:%M:%S%z"),
        git_commit=_get_git_commit(),
        config_hash=_config_hash(config),
        node_name=platform.node(),
        python_version=sys.version,
        config=config,
    )


class RunLogger:
    """Structured JSONL logger for one run.

    Writes two files:
      - solutions.jsonl (one record per solved system)
      - metrics.jsonl   (timing data)
    """

    def __init__(self, output_dir: Path):
        self.output_dir = Path(output_dir)
        self.output_dir.mkdir(parents=True, exist_ok=True)

        self._solutions_path = self.output_dir / "solutions.jsonl"
        self._metrics_path = self.output_dir / "metrics.jsonl"

        # append mode so repeated runs accumulate
        self._solutions_f = open(self._solutions_path, 'a')
        self._metrics_f = open(self._metrics_path, 'a')

        self._solutions_count = 0
        self._metrics_count = 0

    def log_solution(self, solution, **extra: Any):
        """Log a CrtSolution (plus any extra fields)."""
        record = solution.to_dict()
        record.update(extra)
        record["timestamp"] = time.time()
        self._solutions_f.write(json.dumps(record, default=str) + "\n")
        self._solutions_f.flush()
        self._solutions_count += 1

    def log_metrics(self, record: Dict[str, Any]):
        """Log timing metrics."""
        record = dict(record, timestamp=time.time())
        self._metrics_f.write(json.dumps(record, default=str) + "\n")
        self._metrics_f.flush()
        self._metrics_count += 1

    def close(self):
        """Flush and close all log files."""
        for f in [self._solutions_f, self._metrics_f]:
            f.flush()
            f.close()

    @property
    def summary(self) -> Dict[str, int]:
        return {
            "solutions_logged": self._solutions_count,
            "metrics_logged": self._metrics_count,
        }

    def __enter__(self):
        return self

    def __exit__(self, *args):
        self.close()
