import logging

from colorama import Fore, Style


class Logger:
    """A singleton class for colored debug traces on the `wirebuf` logger."""

    _logger = None

    DEBUG = logging.DEBUG

    @classmethod
    def set_level(cls, level: int):
        """
        Sets a log level for the singleton.

        Args:
            level (int): The log level to set.
        """

        if cls._logger is None:
            cls._logger = logging.getLogger("wirebuf")

        cls._logger.setLevel(level)

    @classmethod
    def setup(cls, log_level: int):
        """
        Sets up the Logger singleton for an application that wants traces.

        Adds a stream handler only when the `wirebuf` logger has none, so
        handlers configured by the application are left in place.

        Args:
            log_level (int): The log level to set.
        """

        cls._logger = logging.getLogger("wirebuf")
        cls._logger.setLevel(log_level)

        if not cls._logger.handlers:
            handler = logging.StreamHandler()
            handler.setFormatter(logging.Formatter("%(message)s"))
            cls._logger.addHandler(handler)

    @classmethod
    def debug(cls, message: str) -> None:
        """Logs a debug message; without `setup` the application's logging config applies."""

        if cls._logger is None:
            cls._logger = logging.getLogger("wirebuf")

        cls._logger.debug(f"{Fore.LIGHTBLACK_EX}{Style.BRIGHT}[>]{Style.RESET_ALL} {message}")
