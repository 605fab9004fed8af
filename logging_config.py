"""
Centralized Logging Configuration
Sets up logging for the battery tray icon with both console and file output
"""

import logging
import sys
from pathlib import Path
from logging.handlers import RotatingFileHandler
from datetime import datetime

LOGGER_NAME = "battery_tray"
LOGS_DIR = Path.home() / "Documents" / "BatteryTray" / "logs"


def setup_logging(name: str = LOGGER_NAME, enable_console: bool = True, logs_dir=None) -> logging.Logger:
    """
    Setup logging for the application

    Args:
        name: Name of the logger (default: "battery_tray")
        enable_console: Enable console output (default: True)
        logs_dir: Directory for log files (default: ~/Documents/BatteryTray/logs)

    Returns:
        Configured logger instance
    """
    logger = logging.getLogger(name)

    # Only configure if not already configured
    if logger.handlers:
        return logger

    logger.setLevel(logging.DEBUG)

    detailed_formatter = logging.Formatter(
        fmt='%(asctime)s - %(name)s - %(levelname)s - [%(filename)s:%(lineno)d] - %(message)s',
        datefmt='%Y-%m-%d %H:%M:%S'
    )

    console_formatter = logging.Formatter(
        fmt='%(asctime)s - %(levelname)s - %(message)s',
        datefmt='%H:%M:%S'
    )

    # Console handler - INFO level and above (only if enabled)
    if enable_console:
        console_handler = logging.StreamHandler(sys.stdout)
        console_handler.setLevel(logging.INFO)
        console_handler.setFormatter(console_formatter)
        logger.addHandler(console_handler)

    # Prevent propagation to root logger
    logger.propagate = False

    logs_dir = Path(logs_dir) if logs_dir is not None else LOGS_DIR
    try:
        logs_dir.mkdir(parents=True, exist_ok=True)
    except OSError as e:
        if not enable_console:
            logger.addHandler(logging.NullHandler())
        logger.warning(f"File logging disabled, cannot create {logs_dir}: {e}")
        return logger

    # File handler - all messages (DEBUG and above), one file per day
    log_filename = logs_dir / f"battery_tray_{datetime.now().strftime('%Y%m%d')}.log"
    file_handler = RotatingFileHandler(
        log_filename,
        maxBytes=10 * 1024 * 1024,  # 10 MB
        backupCount=5,
        encoding='utf-8'
    )
    file_handler.setLevel(logging.DEBUG)
    file_handler.setFormatter(detailed_formatter)
    logger.addHandler(file_handler)

    logger.debug(f"Logging initialized - Log file: {log_filename}")

    return logger


def get_logger(module_name: str) -> logging.Logger:
    """
    Get a logger for a specific module

    Args:
        module_name: Name of the module requesting the logger

    Returns:
        Logger instance for the module
    """
    main_logger = logging.getLogger(LOGGER_NAME)

    # If main logger not configured yet, set it up
    if not main_logger.handlers:
        setup_logging()

    return logging.getLogger(f"{LOGGER_NAME}.{module_name}")
