import logging
import sys
from pathlib import Path
from typing import Union

from .config import get_settings

_FORMAT = "%(asctime)s.%(msecs)03d %(levelname)s %(name)s: %(message)s"
_DATEFMT = "%Y-%m-%d %H:%M:%S"


class _ThirdPartyFilter(logging.Filter):
    """Keep taskrepo logs as configured; let other libraries through only at WARNING+."""

    def filter(self, record: logging.LogRecord) -> bool:
        if record.name == "taskrepo" or record.name.startswith("taskrepo."):
            return True
        return record.levelno >= logging.WARNING


def setup_logging(
    level: Union[int, str, None] = None,
    log_dir: Union[str, Path, None] = None,
) -> None:
    """Configure root logging: stderr always, plus `<log_dir>/taskrepo.log` when a directory is given.

    Defaults come from LOG_LEVEL / LOG_DIR. Call once, early; existing root
    handlers are replaced.
    """
    settings = get_settings()
    level = level if level is not None else settings.log_level
    if isinstance(level, str):
        level = logging.getLevelName(level.upper())
        if not isinstance(level, int):
            level = logging.INFO
    log_dir = log_dir if log_dir is not None else settings.log_dir

    root = logging.getLogger()
    root.setLevel(level)
    for h in list(root.handlers):
        root.removeHandler(h)

    fmt = logging.Formatter(fmt=_FORMAT, datefmt=_DATEFMT)

    ch = logging.StreamHandler(sys.stderr)
    ch.setLevel(level)
    ch.setFormatter(fmt)
    ch.addFilter(_ThirdPartyFilter())
    root.addHandler(ch)

    if log_dir:
        path = Path(log_dir)
        path.mkdir(parents=True, exist_ok=True)
        fh = logging.FileHandler(str(path / "taskrepo.log"), encoding="utf-8")
        fh.setLevel(level)
        fh.setFormatter(fmt)
        root.addHandler(fh)

    logging.captureWarnings(True)
