# Shared objects
from multi_target_logging.tables.shared import Base

# Logging related DB objects
from multi_target_logging.tables.log import AppLog

__all__ = ["Base", "AppLog"]
