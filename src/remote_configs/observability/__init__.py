from .logging import LOG_LEVELS, LogMessage, log_to_dict

__all__ = ["LOG_LEVELS", "LogMessage", "log_to_dict"]
