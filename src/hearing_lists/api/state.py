from typing import Any, Dict, Optional
import time

from hearing_lists.data.artefact_store import ArtefactStore

# Artefact store (created on first use from config)
store: Optional[ArtefactStore] = None

# Ingest Stats (for monitoring)
ingest_stats: Dict[str, Any] = {
    'accepted': 0,
    'rejected': 0,
    'last_ingest_time': None,
}

# Metrics
REQUEST_COUNT: Any = None
REQUEST_LATENCY: Any = None
INGEST_TOTAL: Any = None


def record_ingest(list_type: str, accepted: bool) -> None:
    """Update ingest counters for monitoring."""
    key = 'accepted' if accepted else 'rejected'
    ingest_stats[key] = int(ingest_stats.get(key) or 0) + 1
    ingest_stats['last_ingest_time'] = time.time()
    if INGEST_TOTAL is not None:
        INGEST_TOTAL.labels(list_type, key).inc()
