from __future__ import annotations

import logging
import os
import shutil
from pathlib import Path

logger = logging.getLogger("elife")


def ensure_exists(path: Path | str) -> Path:
    """Create each missing directory along ``path`` and return it normalized.

    Directories that already exist are left alone. Any other failure (for
    instance a regular file in the way) raises ``OSError``.
    """

    target = Path(os.path.normpath(path))
    target.mkdir(mode=0o777, parents=True, exist_ok=True)
    logger.debug("Ensured directory %s", target)
    return target


def remove_dir(path: Path | str) -> bool:
    """Remove the directory tree at ``path``.

    Returns ``False`` when there was nothing to remove.
    """

    target = Path(path)
    if not target.exists():
        logger.debug("%s does not exist", target)
        return False
    shutil.rmtree(target)
    logger.info("Removed directory %s", target)
    return True
