"""
Logging configuration for urlloader

Provides structured logging with optional file output and console output.
"""

import logging
import sys
from pathlib import Path


class URLLoaderLogger:
    """Centralized logger for the package"""

    def __init__(
        self, name: str = "urlloader", log_file: Path | None = None, console_output: bool = True
    ):
        """
        Initialize logger

        Args:
            name: Logger name (usually "urlloader" for the package logger)
            log_file: Path to log file (optional)
            console_output: Whether to print to console
        """
        self.logger = logging.getLogger(name)
        self.logger.setLevel(logging.DEBUG)

        # Clear existing handlers
        self.logger.handlers = []

        # Format: timestamp - module - level - message
        formatter = logging.Formatter(
            "%(asctime)s - %(name)s - %(levelname)s - %(message)s", datefmt="%Y-%m-%d %H:%M:%S"
        )

        # stderr, so payloads written to stdout stay clean
        if console_output:
            console_handler = logging.StreamHandler(sys.stderr)
            console_handler.setLevel(logging.INFO)
            console_handler.setFormatter(formatter)
            self.logger.addHandler(console_handler)

        if log_file:
            log_file.parent.mkdir(parents=True, exist_ok=True)
            file_handler = logging.FileHandler(log_file, mode="a", encoding="utf-8")
            file_handler.setLevel(logging.DEBUG)
            file_handler.setFormatter(formatter)
            self.logger.addHandler(file_handler)

    def get_logger(self) -> logging.Logger:
        """Get the underlying logger instance"""
        return self.logger


def setup_logging(log_file: Path | None = None, verbose: bool = True) -> logging.Logger:
    """
    Setup logging for a command line run

    Args:
        log_file: Optional file that receives DEBUG-level output
        verbose: Whether to also print INFO and above to the console

    Returns:
        Configured logger instance
    """
    logger_wrapper = URLLoaderLogger(name="urlloader", log_file=log_file, console_output=verbose)
    return logger_wrapper.get_logger()


def get_module_logger(module_name: str) -> logging.Logger:
    """
    Get logger for a specific module

    Args:
        module_name: Name of the module (e.g., 'loader', 'engine')

    Returns:
        Logger instance
    """
    return logging.getLogger(f"urlloader.{module_name}")
