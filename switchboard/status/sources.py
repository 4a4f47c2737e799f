from collections import Counter
from collections.abc import Iterable

from ..core.models import SourceSummary

__all__ = ["summarize_sources"]

UNKNOWN = "unknown"


def summarize_sources(sources: Iterable[str | None]) -> SourceSummary:
    """Collapse per-account source tags into one label, e.g. 'env×2+config'.

    Most frequent first; ties keep first-seen order.
    """
    counts: Counter[str] = Counter()
    for source in sources:
        key = source.strip() if source and source.strip() else UNKNOWN
        counts[key] += 1
    ranked = sorted(counts.items(), key=lambda kv: -kv[1])
    if not ranked:
        return SourceSummary(label=UNKNOWN, parts=[])
    label = "+".join(f"{key}×{n}" if n > 1 else key for key, n in ranked)
    return SourceSummary(label=label, parts=[key for key, _ in ranked])
