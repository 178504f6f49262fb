from __future__ import annotations

import logging
from pathlib import Path

from gradepoint.config.settings import settings

logger = logging.getLogger(__name__)


def export_report(text: str, directory: str | Path | None = None, filename: str | None = None) -> Path | None:
    """Write the report to disk. Failures are logged and yield None."""
    target = Path(directory if directory is not None else settings.report_dir) / (filename or settings.report_filename)
    try:
        target.parent.mkdir(parents=True, exist_ok=True)
        target.write_text(text, encoding="utf-8")
    except OSError as exc:
        logger.warning("GPA report export to %s failed: %s", target, exc)
        return None
    logger.info("GPA report written to %s", target)
    return target
