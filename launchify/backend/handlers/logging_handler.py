"""
LoggingHandler module for managing logging operations.
This module handles log file creation and per-run rotation.
"""

import logging
import logging.handlers
from pathlib import Path
from typing import Optional


class LoggingHandler:
    """
    Central logging handler for Launchify.
    - Uses ~/.local/share/launchify/logs/ as the log directory.
    - Rotates the CLI log on every run so each run starts a fresh file.
    Usage:
        handler = LoggingHandler()
        handler.rotate_log_for_logger('launchify', 'launchify-cli.log')
        logger = handler.setup_logger('launchify', 'launchify-cli.log')
    """
    def __init__(self, log_dir: Optional[Path] = None):
        if log_dir is None:
            from launchify.shared.paths import get_launchify_logs_dir
            log_dir = get_launchify_logs_dir()
        self.log_dir = Path(log_dir)
        self.ensure_log_directory()

    def ensure_log_directory(self) -> None:
        """Ensure the log directory exists."""
        try:
            self.log_dir.mkdir(parents=True, exist_ok=True)
        except OSError as e:
            print(f"Failed to create log directory: {e}")

    def rotate_log_file_per_run(self, log_file_path: Path, backup_count: int = 5):
        """Rotate the log file on every run, keeping up to backup_count backups."""
        if not log_file_path.exists():
            return
        oldest = log_file_path.with_suffix(log_file_path.suffix + f'.{backup_count}')
        if oldest.exists():
            oldest.unlink()
        for i in range(backup_count - 1, 0, -1):
            src = log_file_path.with_suffix(log_file_path.suffix + f'.{i}')
            dst = log_file_path.with_suffix(log_file_path.suffix + f'.{i+1}')
            if src.exists():
                src.rename(dst)
        log_file_path.rename(log_file_path.with_suffix(log_file_path.suffix + '.1'))

    def rotate_log_for_logger(self, name: str, log_file: Optional[str] = None, backup_count: int = 5):
        """
        Rotate the log file for a logger before any logging occurs.
        Must be called BEFORE the file handler is attached.
        """
        file_path = self.log_dir / (log_file if log_file else f"{name}.log")
        try:
            self.rotate_log_file_per_run(file_path, backup_count=backup_count)
        except OSError as e:
            print(f"Failed to rotate log file {file_path}: {e}")

    def setup_logger(self, name: str, log_file: Optional[str] = None) -> logging.Logger:
        """Set up a logger with a console handler (ERROR+) and, if log_file is given, a rotating file handler."""
        logger = logging.getLogger(name)
        logger.setLevel(logging.DEBUG)
        logger.propagate = False

        file_formatter = logging.Formatter(
            '%(asctime)s - %(name)s - %(levelname)s - %(message)s'
        )
        console_formatter = logging.Formatter(
            '%(levelname)s: %(message)s'
        )

        if not any(type(h) is logging.StreamHandler for h in logger.handlers):
            console_handler = logging.StreamHandler()
            console_handler.setLevel(logging.ERROR)
            console_handler.setFormatter(console_formatter)
            logger.addHandler(console_handler)

        if log_file:
            file_path = self.log_dir / log_file
            if not any(isinstance(h, logging.handlers.RotatingFileHandler) and getattr(h, 'baseFilename', None) == str(file_path) for h in logger.handlers):
                file_handler = logging.handlers.RotatingFileHandler(
                    file_path, mode='a', encoding='utf-8', maxBytes=1024*1024, backupCount=5
                )
                file_handler.setLevel(logging.DEBUG)
                file_handler.setFormatter(file_formatter)
                logger.addHandler(file_handler)

        return logger
