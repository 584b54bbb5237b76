"""Logging ORM tables written by the database sink."""


from sqlalchemy import BigInteger, Column, Float, Integer, String, Text

from multi_target_logging.tables.shared import Base


class AppLog(Base):
    """Log records persisted by ``DatabaseSink``."""

    __tablename__ = 'app_logs'

    id = Column(BigInteger().with_variant(Integer, "sqlite"), primary_key=True, autoincrement=True)
    ts = Column(Float, nullable=False, doc="Record creation time as unix timestamp")
    level = Column(String(length=32), index=True, doc="Python logging level name")
    logger = Column(String(length=256), doc="Name of the logger that produced the record")
    message = Column(Text, doc="Rendered log message")
    extra_json = Column(Text, doc="Full JSON payload including attributes and scopes")

    def __repr__(self) -> str:
        return f"AppLog(id={self.id!r}, level={self.level!r}, logger={self.logger!r}, message={self.message!r})"
