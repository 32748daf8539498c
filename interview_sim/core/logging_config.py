"""
Logging configuration for the Interview Simulator API.

Provides structured logging without exposing candidate contact details.
"""
import logging
import sys
from pathlib import Path
from logging.handlers import RotatingFileHandler


def setup_logging(log_level: str = "INFO", log_dir: str = "logs"):
    """
    Configure application logging.
    
    Args:
        log_level: Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
        log_dir: Directory for the rotating log file
    """
    level = getattr(logging, log_level.upper(), logging.INFO)
    
    log_path = Path(log_dir)
    log_path.mkdir(exist_ok=True)
    
    logger = logging.getLogger()
    logger.setLevel(level)
    logger.handlers.clear()
    
    console_handler = logging.StreamHandler(sys.stdout)
    console_handler.setLevel(level)
    console_handler.setFormatter(logging.Formatter(
        "%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S"
    ))
    
    file_handler = RotatingFileHandler(
        log_path / "interview_sim.log",
        maxBytes=10 * 1024 * 1024,  # 10MB
        backupCount=5
    )
    file_handler.setLevel(level)
    file_handler.setFormatter(logging.Formatter(
        "%(asctime)s - %(name)s - %(levelname)s - %(funcName)s:%(lineno)d - %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S"
    ))
    
    logger.addHandler(console_handler)
    logger.addHandler(file_handler)
    
    logging.getLogger("uvicorn").setLevel(logging.WARNING)
    logging.getLogger("uvicorn.access").setLevel(logging.WARNING)
    logging.getLogger("multipart").setLevel(logging.WARNING)


def sanitize_log_data(data: dict) -> dict:
    """
    Mask candidate contact details before they reach a log line.
    
    Names are reduced to initials, emails keep only their domain and
    phone numbers keep only the last two digits.
    
    Args:
        data: Dictionary to sanitize
        
    Returns:
        Sanitized copy of the dictionary
    """
    sanitized = data.copy()
    
    for key, value in sanitized.items():
        if not isinstance(value, str) or not value:
            continue
        lowered = key.lower()
        if "email" in lowered:
            domain = value.split("@", 1)[1] if "@" in value else ""
            sanitized[key] = f"***@{domain}" if domain else "***"
        elif "phone" in lowered:
            digits = [c for c in value if c.isdigit()]
            sanitized[key] = "***" + "".join(digits[-2:])
        elif "name" in lowered:
            sanitized[key] = "".join(part[0] + "." for part in value.split() if part)
    
    return sanitized
