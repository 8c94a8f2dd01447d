import logging
import sys


class Log:
    """Centralized logging for the partition-and-seal pipeline."""

    _logger: logging.Logger = logging.getLogger("paysync")
    _FORMAT = "%(asctime)s [%(levelname)s] %(message)s"
    _DEV_FORMAT = "%(asctime)s [%(levelname)s] %(module)s: %(message)s"

    @classmethod
    def configure(cls, log_level: str, app_env: str = "dev") -> None:
        """Configure the logger level and attach a single stdout handler.

        The dev environment also prints the emitting module.
        """
        cls._logger.setLevel(log_level.upper())
        if not cls._logger.handlers:
            handler = logging.StreamHandler(sys.stdout)
            fmt = cls._DEV_FORMAT if app_env == "dev" else cls._FORMAT
            handler.setFormatter(logging.Formatter(fmt))
            cls._logger.addHandler(handler)

    @staticmethod
    def mask(secret: str, visible: int = 2) -> str:
        """Hide all but the last few characters of a password-like value."""
        if len(secret) <= visible:
            return "*" * len(secret)
        return "*" * (len(secret) - visible) + secret[-visible:]

    @classmethod
    def info(cls, message: str, **kwargs: object) -> None:
        cls._logger.info(message, extra=kwargs)

    @classmethod
    def error(cls, message: str, **kwargs: object) -> None:
        cls._logger.error(message, extra=kwargs)

    @classmethod
    def warning(cls, message: str, **kwargs: object) -> None:
        cls._logger.warning(message, extra=kwargs)

    @classmethod
    def debug(cls, message: str, **kwargs: object) -> None:
        cls._logger.debug(message, extra=kwargs)
