"""Route log records to standard or error sinks by severity."""

from multi_target_logging.utilities.log import (AggregateEmitError,
                                                MultiTargetRouter,
                                                RoutedLogger,
                                                RouterHandler,
                                                Sink,
                                                SinkEmitError,
                                                new_router)

__all__ = [
    "AggregateEmitError",
    "MultiTargetRouter",
    "RoutedLogger",
    "RouterHandler",
    "Sink",
    "SinkEmitError",
    "new_router",
]
