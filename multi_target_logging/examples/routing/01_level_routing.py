"""Route info logs to stdout and error logs to stderr.

Demonstrates:
    - A router with one standard sink and one error sink
    - Scoping every record under "example-1"

Output:
    {"time": "...", "level": "INFO", "msg": "info message", "example-1": {"key": "value"}}    <-- stdout
    {"time": "...", "level": "ERROR", "msg": "error message", "example-1": {"error": "boom"}}  <-- stderr

Run:
    python -m multi_target_logging.examples run routing/01_level_routing
"""

from __future__ import annotations

import logging
import sys

from multi_target_logging.utilities.log.handlers import JSONStreamSink
from multi_target_logging.utilities.log.router import MultiTargetRouter


def main() -> None:
    output_sink = JSONStreamSink(sys.stdout, level=logging.INFO)
    error_output_sink = JSONStreamSink(sys.stderr, level=logging.ERROR)
    router = MultiTargetRouter(
        [output_sink],        # all targets for non-error logs
        [error_output_sink],  # all targets for error logs
    )
    log = router.logger(__name__).with_scope("example-1")
    log.info("info message", key="value")
    log.error("error message", error=RuntimeError("boom"))


if __name__ == "__main__":
    main()
