"""View: compose observations into the access URL section and print it."""

from accessurls.view.orchestrator import (
    AccessURLResult,
    AccessURLTable,
    print_result,
    run_access_urls,
)

__all__ = [
    "AccessURLResult",
    "AccessURLTable",
    "print_result",
    "run_access_urls",
]
