from multi_target_logging.settings.main import GeneralSettings, LogSettings

__all__ = ["GeneralSettings", "LogSettings"]
