"""
In-process counters for observability. Process-local; for multi-worker use external metrics (e.g. Prometheus).
"""
import threading

# Biography drafts written by POST /biography/sessions/{id}/generate.
drafts_generated_total: int = 0
_drafts_generated_lock = threading.Lock()


def increment_drafts_generated_total() -> int:
    """Increment drafts_generated_total; return new value. Thread-safe."""
    global drafts_generated_total
    with _drafts_generated_lock:
        drafts_generated_total += 1
        return drafts_generated_total
