"""Send error logs to stdout and stderr, everything else to stdout only.

Demonstrates:
    - The same sink placed in both groups
    - Error records reaching the shared sink exactly once

Output:
    {"time": "...", "level": "INFO", "msg": "info message", "example-2": {"key": "value"}}    <-- stdout
    {"time": "...", "level": "ERROR", "msg": "error message", "example-2": {"error": "boom"}}  <-- stdout
    {"time": "...", "level": "ERROR", "msg": "error message", "example-2": {"error": "boom"}}  <-- stderr

Run:
    python -m multi_target_logging.examples run routing/02_shared_sink
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
        [output_sink],                     # all targets for non-error logs
        [output_sink, error_output_sink],  # all targets for error logs
    )
    log = router.logger(__name__).with_scope("example-2")
    log.info("info message", key="value")
    log.error("error message", error=RuntimeError("boom"))


if __name__ == "__main__":
    main()
