import logging
import sys
from typing import List, Optional

from sqlalchemy.engine import Engine

from multi_target_logging.settings.main import LogSettings
from multi_target_logging.utilities.log.bridge import RouterHandler
from multi_target_logging.utilities.log.handlers import DatabaseSink, JSONStreamSink, SplunkHECSink
from multi_target_logging.utilities.log.logger import RoutedLogger
from multi_target_logging.utilities.log.router import MultiTargetRouter
from multi_target_logging.utilities.log.sinks import Sink


class LoggingService:
    def __init__(self, logger_name: str, settings: Optional[LogSettings] = None, db_engine: Optional[Engine] = None):

        self.db_engine = db_engine
        self.settings: LogSettings = settings if settings else LogSettings()
        self.propagate = False

        # Custom sinks appended by the caller, on top of the ones built from settings
        self.sinks: List[Sink] = []
        self.error_sinks: List[Sink] = []

        self.logger_name: str = logger_name
        self.logger = logging.getLogger(self.logger_name)

    def set_propagate(self, propagate: bool):
        self.propagate = propagate

    def append_sink(self, sink: Sink, error: bool = False):
        if error:
            self.error_sinks.append(sink)
        else:
            self.sinks.append(sink)

    def build_router(self) -> MultiTargetRouter:
        standard: List[Sink] = []
        errors: List[Sink] = []

        if self.settings.log_to_stdout:
            stdout = JSONStreamSink(sys.stdout, level=self.settings.log_level)
            standard.append(stdout)
            # Without stderr, errors still have to land somewhere
            if not self.settings.log_to_stderr:
                errors.append(stdout)
        if self.settings.log_to_stderr:
            errors.append(JSONStreamSink(sys.stderr, level=logging.ERROR))

        if self.settings.log_to_db and self.db_engine is not None:
            errors.append(DatabaseSink(self.db_engine, level=logging.ERROR))
        if self.settings.log_to_splunk and self.settings.splunk_hec_url and self.settings.splunk_token:
            errors.append(SplunkHECSink(self.settings.splunk_hec_url, self.settings.splunk_token,
                                        timeout=self.settings.splunk_timeout))

        return MultiTargetRouter(standard + self.sinks, errors + self.error_sinks)

    def configure_logger(self) -> logging.Logger:
        # Let every record through; the router's sinks do the filtering
        self.logger.setLevel(logging.DEBUG)

        # Record is handled only by the handlers you attached to this logger
        self.logger.propagate = self.propagate

        # Idempotence guard: if a router is already attached, return to avoid duplicates
        if any(isinstance(h, RouterHandler) for h in self.logger.handlers):
            return self.logger

        self.logger.addHandler(RouterHandler(self.build_router(), swallow_errors=self.settings.swallow_errors))
        return self.logger

    def routed_logger(self) -> RoutedLogger:
        return RoutedLogger(self.build_router(), name=self.logger_name, swallow_errors=self.settings.swallow_errors)

    def stop(self):
        for handler in list(self.logger.handlers):
            if isinstance(handler, RouterHandler):
                self.logger.removeHandler(handler)
                handler.close()
