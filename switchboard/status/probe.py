import logging
from pathlib import Path

from ..core.models import Probe

__all__ = ["path_exists"]

logger = logging.getLogger(__name__)


def path_exists(path: str | None) -> Probe | None:
    """Check a configured path. None when nothing is configured; UNKNOWN when the check fails."""
    p = (path or "").strip()
    if not p:
        return None
    try:
        return Probe.PRESENT if Path(p).expanduser().exists() else Probe.MISSING
    except (OSError, ValueError) as e:
        logger.debug("path probe failed for %s: %s", p, e)
        return Probe.UNKNOWN
