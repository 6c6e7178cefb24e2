"""
utils.py - Utility Functions and Helpers
=========================================
Common utility functions used throughout the snapping helpers.
"""

import logging
import time
from functools import wraps
from pathlib import Path
from typing import Optional, Tuple, Union

import numpy as np


logger = logging.getLogger(__name__)


# ============================================================================
# FILE OPERATIONS
# ============================================================================

def ensure_directory(path: Union[str, Path]) -> Path:
    """Ensure directory exists, create if necessary."""
    path = Path(path)
    path.mkdir(parents=True, exist_ok=True)
    return path


# ============================================================================
# GEOMETRIC UTILITIES
# ============================================================================

def calculate_distance(point1: Tuple[float, float],
                      point2: Tuple[float, float]) -> float:
    """Calculate Euclidean distance between two points."""
    x1, y1 = point1
    x2, y2 = point2
    return float(np.sqrt((x2 - x1)**2 + (y2 - y1)**2))


# ============================================================================
# PERFORMANCE UTILITIES
# ============================================================================

def timer(func):
    """Decorator to time function execution."""
    @wraps(func)
    def wrapper(*args, **kwargs):
        start = time.perf_counter()
        result = func(*args, **kwargs)
        end = time.perf_counter()
        logger.debug(f"{func.__name__} took {(end - start) * 1000:.3f} ms")
        return result
    return wrapper


# ============================================================================
# LOGGING CONFIGURATION
# ============================================================================

def setup_logging(log_level: Optional[str] = None, log_file: Optional[str] = None):
    """Setup logging configuration."""
    from config import Config

    log_config = Config.LOGGING
    log_level = log_level or log_config.get('level', 'INFO')

    # Set log level
    level = getattr(logging, log_level.upper(), logging.INFO)

    # Create formatter
    formatter = logging.Formatter(
        log_config['format'],
        datefmt=log_config['date_format']
    )

    # Setup handlers
    handlers = []

    # Console handler
    if log_config.get('console_output', True):
        console_handler = logging.StreamHandler()
        console_handler.setFormatter(formatter)
        handlers.append(console_handler)

    # File handler
    if log_file or log_config.get('file'):
        file_path = log_file or log_config['file']
        ensure_directory(Path(file_path).parent)

        from logging.handlers import RotatingFileHandler
        file_handler = RotatingFileHandler(
            file_path,
            maxBytes=log_config.get('max_bytes', 10*1024*1024),
            backupCount=log_config.get('backup_count', 5)
        )
        file_handler.setFormatter(formatter)
        handlers.append(file_handler)

    # Configure root logger
    logging.basicConfig(
        level=level,
        handlers=handlers,
        force=True
    )

    logger.info(f"Logging configured: level={log_level}")


# ============================================================================
# VALIDATION AND ERROR HANDLING
# ============================================================================

class ValidationError(ValueError):
    """Custom exception for validation errors."""
    pass
