import logging
import os
import sys
from datetime import datetime
from logging import Logger
from colorama import init, Fore, Style
init(autoreset=True)

LOG_FILE_PREFIX = "chronoscope_"


def create_log_directory(log_folder: str = None):
    """
    Ensures that the log directory exists. If not, it creates it.

    Args:
        log_folder: Optional path to log folder. If None, uses platform-specific location.
    """
    if log_folder is None:
        from chronoscope.utils.paths import get_logs_dir
        log_folder = str(get_logs_dir())

    if not os.path.exists(log_folder):
        os.makedirs(log_folder)
    return log_folder


def get_log_file_path(log_folder: str) -> str:
    """
    Returns a log file path with a timestamp in the name.
    Format: logs/chronoscope_YYYY-mm-dd_HHMMSS.log
    """
    timestamp = datetime.now().strftime("%Y-%m-%d_%H%M%S")
    return os.path.join(log_folder, f"{LOG_FILE_PREFIX}{timestamp}.log")


def purge_old_logs(log_folder: str, keep: int = 10):
    """
    Removes older log files, keeping only the most recent 'keep' files.
    Logs are named chronoscope_YYYY-mm-dd_HHMMSS.log, so lexicographical
    sort matches chronological order.
    """
    all_logs = [f for f in os.listdir(log_folder)
                if f.startswith(LOG_FILE_PREFIX) and f.endswith(".log")]
    all_logs.sort()

    if keep <= 0:
        logs_to_remove = all_logs
    else:
        logs_to_remove = all_logs[:-keep]
    for old_file in logs_to_remove:
        os.remove(os.path.join(log_folder, old_file))


class ColorFormatter(logging.Formatter):
    """
    A formatter that colorizes log level names using colorama.
    """
    color_map = {
        logging.DEBUG: Fore.BLUE,
        logging.INFO: Fore.GREEN,
        logging.WARNING: Fore.YELLOW,
        logging.ERROR: Fore.RED,
        logging.CRITICAL: Fore.LIGHTRED_EX,
    }

    def format(self, record):
        color = self.color_map.get(record.levelno, Fore.WHITE)
        # Copy so the file handler still sees the plain level name
        record = logging.makeLogRecord(record.__dict__)
        record.levelname = f"{color}{record.levelname}{Style.RESET_ALL}"
        return super().format(record)


def _file_formatter() -> logging.Formatter:
    return logging.Formatter(
        fmt="%(asctime)s | %(levelname)s | %(name)s | %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S"
    )


def init_logger(name: str = "chronoscope", level: int = logging.INFO) -> Logger:
    """
    Initializes the named logger with a colored console handler.
    File output is added later by Log.enable_file_logging().
    :param name: The logger's name.
    :param level: Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL).
    :return: A configured logger instance.
    """
    logger = logging.getLogger(name)
    logger.setLevel(level)
    logger.propagate = False  # Prevent duplicate logs if root logger also logs

    # Ensure logger doesn't get duplicate handlers if init_logger is called multiple times
    if not logger.handlers:
        console_handler = logging.StreamHandler(sys.stdout)
        console_handler.setLevel(level)
        console_handler.setFormatter(ColorFormatter(
            fmt="%(asctime)s | %(levelname)s | %(message)s",
            datefmt="%H:%M:%S"
        ))
        logger.addHandler(console_handler)

    return logger


LEVEL_NAMES = {
    "DEBUG": logging.DEBUG,
    "INFO": logging.INFO,
    "WARNING": logging.WARNING,
    "ERROR": logging.ERROR,
    "CRITICAL": logging.CRITICAL,
}


def level_from_name(level: str | int, default: int = logging.INFO) -> int:
    """Resolve a level name ("debug", "INFO", ...) or int to a logging level."""
    if isinstance(level, int):
        return level
    return LEVEL_NAMES.get(str(level).strip().upper(), default)


class Log:
    """
    Application-wide logging facade (Log.info(...), Log.error(...)),
    backed by Python's logging.

    Console output only until enable_file_logging() is called; the
    initial level comes from the CHRONOSCOPE_LOG_LEVEL environment variable.
    """
    _logger: Logger = init_logger(
        name="chronoscope",
        level=level_from_name(os.getenv("CHRONOSCOPE_LOG_LEVEL", "INFO")),
    )
    _file_handler: logging.FileHandler | None = None

    @classmethod
    def set_logger(cls, logger: Logger):
        """Replace the underlying logger at runtime."""
        cls._logger = logger

    @classmethod
    def get_logger(cls) -> Logger:
        return cls._logger

    @classmethod
    def set_level(cls, level: str | int):
        """
        Set the logging level dynamically.

        Args:
            level: Log level as string ("DEBUG", "INFO", "WARNING", "ERROR") or int
        """
        level = level_from_name(level)
        cls._logger.setLevel(level)
        for handler in cls._logger.handlers:
            handler.setLevel(level)

    @classmethod
    def enable_file_logging(cls, log_folder: str = None, keep: int = 10) -> str:
        """
        Add a timestamped file handler (once) and return the log file path.
        """
        if cls._file_handler is not None:
            return cls._file_handler.baseFilename

        log_folder = create_log_directory(log_folder)
        purge_old_logs(log_folder, keep=keep)
        handler = logging.FileHandler(get_log_file_path(log_folder), encoding="utf-8")
        handler.setLevel(cls._logger.level)
        handler.setFormatter(_file_formatter())
        cls._logger.addHandler(handler)
        cls._file_handler = handler
        return handler.baseFilename

    @classmethod
    def debug(cls, text: str):
        cls._logger.debug(text)

    @classmethod
    def info(cls, text: str):
        cls._logger.info(text)

    @classmethod
    def warning(cls, text: str, exc_info: bool = False):
        if exc_info:
            cls._logger.warning(text, exc_info=True)
        else:
            cls._logger.warning(text)

    @classmethod
    def error(cls, text: str):
        cls._logger.error(text)
