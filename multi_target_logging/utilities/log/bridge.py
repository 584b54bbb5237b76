import logging

from multi_target_logging.utilities.log.sinks import Sink


class RouterHandler(logging.Handler):
    def __init__(self, sink: Sink, swallow_errors: bool = True):
        """
        :param sink:
                usually a MultiTargetRouter; any object following the sink protocol works
        :param swallow_errors:
                safety switch if one or more routed sinks fail inside handle(),
                the handler catches the AggregateEmitError, calls handleError(record)
                (so you get a traceback in dev if logging.raiseExceptions is True),
                and returns. Your app/workers don't crash just because logging failed.
                Set False for testing and debugging
        """
        super().__init__()
        self.sink = sink
        self.swallow_errors = swallow_errors

    def emit(self, record: logging.LogRecord):
        # Level and group selection are the sink's job, not this handler's
        if not self.sink.enabled(record.levelno):
            return
        try:
            self.sink.handle(record)
        except Exception:
            if not self.swallow_errors:
                raise
            self.handleError(record)
