"""
Run directories and logging for arena batches.

Every arena invocation gets its own directory::

    <output_dir>/<YYYYMMDD>_<HHMMSS>_<label>/
        arena.log      full log of the batch
        summary.json   per-seat win counts plus every game record

The console only shows INFO and above; the log file follows the requested
level so ``--verbose`` runs keep every move on disk.
"""

import json
import logging
from datetime import datetime
from pathlib import Path
from typing import Any, Dict, Optional, Tuple

LOG_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'
LOG_NAME = "arena.log"
SUMMARY_NAME = "summary.json"


def _run_label(black: str, white: str, experiment_name: Optional[str]) -> str:
    label = experiment_name or f"{black}_vs_{white}"
    return "".join(ch if ch.isalnum() or ch in "-_" else "-" for ch in label)


def create_arena_run(output_dir: Path,
                     black: str = "black",
                     white: str = "white",
                     experiment_name: Optional[str] = None) -> Path:
    """
    Create the directory for one arena batch.

    The label defaults to ``<black>_vs_<white>``. Runs started within the
    same second get a numeric suffix instead of sharing a directory.
    """
    timestamp = datetime.now().strftime("%Y%m%d_%H%M%S")
    run_dir = Path(output_dir) / f"{timestamp}_{_run_label(black, white, experiment_name)}"
    candidate, suffix = run_dir, 1
    while candidate.exists():
        candidate = run_dir.with_name(f"{run_dir.name}_{suffix}")
        suffix += 1
    candidate.mkdir(parents=True)
    return candidate


def attach_run_logging(run_dir: Path, level: int = logging.INFO) -> Path:
    """
    Route the root logger to ``run_dir/arena.log`` and the console.

    Replaces any handlers already on the root logger so repeated runs in one
    process do not duplicate output.
    """
    log_file = run_dir / LOG_NAME
    formatter = logging.Formatter(LOG_FORMAT, datefmt='%Y-%m-%d %H:%M:%S')

    root_logger = logging.getLogger()
    root_logger.setLevel(level)
    for handler in root_logger.handlers[:]:
        root_logger.removeHandler(handler)
        handler.close()

    file_handler = logging.FileHandler(log_file, mode='w', encoding='utf-8')
    file_handler.setLevel(level)
    file_handler.setFormatter(formatter)
    root_logger.addHandler(file_handler)

    console_handler = logging.StreamHandler()
    console_handler.setLevel(max(level, logging.INFO))
    console_handler.setFormatter(formatter)
    root_logger.addHandler(console_handler)

    return log_file


def setup_arena_logging(output_dir: Path,
                        black: str = "black",
                        white: str = "white",
                        experiment_name: Optional[str] = None,
                        level: int = logging.INFO) -> Tuple[Path, Path]:
    """
    Create a run directory and start logging into it.

    Returns:
        Tuple of (run_directory, log_file_path)
    """
    run_dir = create_arena_run(output_dir, black, white, experiment_name)
    log_file = attach_run_logging(run_dir, level)
    logging.getLogger(__name__).info(f"Arena run directory: {run_dir}")
    return run_dir, log_file


def write_run_summary(run_dir: Path, report: Dict[str, Any]) -> Path:
    """Write the arena report as ``summary.json`` next to the run log."""
    summary_path = run_dir / SUMMARY_NAME
    with open(summary_path, "w", encoding="utf-8") as f:
        json.dump(report, f, indent=2)
    return summary_path
