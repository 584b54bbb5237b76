"""Severity routing of log records to standard and error sinks."""

from multi_target_logging.utilities.log.bridge import RouterHandler
from multi_target_logging.utilities.log.errors import AggregateEmitError, SinkEmitError
from multi_target_logging.utilities.log.handlers import (BaseSink,
                                                         DatabaseSink,
                                                         HandlerSink,
                                                         JSONStreamSink,
                                                         MemorySink,
                                                         SplunkHECSink)
from multi_target_logging.utilities.log.logger import RoutedLogger
from multi_target_logging.utilities.log.main import LoggingService
from multi_target_logging.utilities.log.router import (ERROR_THRESHOLD,
                                                       MultiTargetRouter,
                                                       is_error_class,
                                                       new_router)
from multi_target_logging.utilities.log.sinks import Sink, clone_record

__all__ = [
    "ERROR_THRESHOLD",
    "AggregateEmitError",
    "BaseSink",
    "DatabaseSink",
    "HandlerSink",
    "JSONStreamSink",
    "LoggingService",
    "MemorySink",
    "MultiTargetRouter",
    "RoutedLogger",
    "RouterHandler",
    "Sink",
    "SinkEmitError",
    "SplunkHECSink",
    "clone_record",
    "is_error_class",
    "new_router",
]
