import logging
import os
import sys
from datetime import datetime
from logging import Logger
from typing import Optional

from colorama import init, Fore, Style
init(autoreset=True)

LOG_FILE_PREFIX = "historie_timeline_"
LOG_FOLDER_ENV = "HISTORIE_TIMELINE_LOG_DIR"


def create_log_directory(log_folder: str) -> str:
    """
    Ensures that the log directory exists. If not, it creates it.
    """
    if not os.path.exists(log_folder):
        os.makedirs(log_folder)
    return log_folder


def get_log_file_path(log_folder: str) -> str:
    """
    Returns a log file path with a timestamp in the name.
    Format: <folder>/historie_timeline_YYYY-mm-dd_HHMMSS.log
    """
    timestamp = datetime.now().strftime("%Y-%m-%d_%H%M%S")
    return os.path.join(log_folder, f"{LOG_FILE_PREFIX}{timestamp}.log")


def purge_old_logs(log_folder: str, keep: int = 10):
    """
    Removes older log files, keeping only the most recent 'keep' files.
    Timestamped names sort lexicographically in chronological order.
    """
    all_logs = [f for f in os.listdir(log_folder)
                if f.startswith(LOG_FILE_PREFIX) and f.endswith(".log")]
    all_logs.sort()

    logs_to_remove = all_logs[:-keep] if keep > 0 else all_logs
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
        # Copy so other handlers keep the plain level name
        record = logging.makeLogRecord(record.__dict__)
        record.levelname = f"{color}{record.levelname}{Style.RESET_ALL}"
        return super().format(record)


def init_logger(
    name: str = "HistorieTimeline",
    log_folder: Optional[str] = None,
    console_logging: bool = True,
    file_logging: bool = False,
    level: int = logging.INFO
) -> Logger:
    """
    Initializes and configures the logger with the specified settings.
    :param name: The logger's name.
    :param log_folder: The folder where log files should go. Required for file logging.
    :param console_logging: Whether to log to the console (stderr).
    :param file_logging: Whether to log to a file.
    :param level: Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL).
    :return: A configured logger instance.
    """
    logger = logging.getLogger(name)
    logger.setLevel(level)
    logger.propagate = False

    # Guard against duplicate handlers when called more than once
    if not logger.handlers:
        if file_logging and log_folder:
            log_folder = create_log_directory(log_folder)
            purge_old_logs(log_folder, keep=10)
            file_handler = logging.FileHandler(get_log_file_path(log_folder), encoding="utf-8")
            file_handler.setLevel(level)
            file_handler.setFormatter(logging.Formatter(
                fmt="%(asctime)s | %(levelname)s | %(name)s | %(message)s",
                datefmt="%Y-%m-%d %H:%M:%S"
            ))
            logger.addHandler(file_handler)

        if console_logging:
            console_handler = logging.StreamHandler(sys.stderr)
            console_handler.setLevel(level)
            console_handler.setFormatter(ColorFormatter(
                fmt="%(asctime)s | %(levelname)s | %(message)s",
                datefmt="%H:%M:%S"
            ))
            logger.addHandler(console_handler)

    return logger


class Log:
    """
    Class-level wrapper so callers write Log.info(...) while the
    messages go through Python's logging.

    File logging is enabled when the HISTORIE_TIMELINE_LOG_DIR
    environment variable names a folder.
    """
    _logger: Logger = init_logger(
        log_folder=os.environ.get(LOG_FOLDER_ENV),
        file_logging=bool(os.environ.get(LOG_FOLDER_ENV)),
    )

    @classmethod
    def get_logger(cls) -> Logger:
        return cls._logger

    @classmethod
    def set_logger(cls, logger: Logger):
        """
        Replace the logger at runtime (e.g. to route into an application's
        own logging tree).
        """
        cls._logger = logger

    @classmethod
    def set_level(cls, level: str | int):
        """
        Set the logging level dynamically.

        Args:
            level: Log level as string ("DEBUG", "INFO", "WARNING", "ERROR") or int
        """
        if isinstance(level, str):
            level_map = {
                "DEBUG": logging.DEBUG,
                "INFO": logging.INFO,
                "WARNING": logging.WARNING,
                "ERROR": logging.ERROR,
                "CRITICAL": logging.CRITICAL,
            }
            level = level_map.get(level.upper(), logging.INFO)

        cls._logger.setLevel(level)
        for handler in cls._logger.handlers:
            handler.setLevel(level)

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
