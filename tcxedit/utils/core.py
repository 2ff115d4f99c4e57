#!/usr/bin/env python3
"""
tcxedit Utilities Module - logging setup shared by every component
"""
import sys
import logging
from pathlib import Path
from typing import Optional

from ..const import LOG_FORMAT, LOG_DATE_FORMAT


class LoggingConfig:
    """Centralized logging configuration using standard logging"""
    
    _initialized = False
    
    @classmethod
    def setup_logging(cls, 
                     log_level: str = "INFO",
                     log_file: Optional[str] = None,
                     log_format: Optional[str] = None,
                     enable_console: bool = True) -> None:
        """
        Setup standard logging configuration
        
        Args:
            log_level: Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
            log_file: Path to log file (optional)
            log_format: Custom log format
            enable_console: Enable console logging
        """
        if cls._initialized:
            return
        
        numeric_level = getattr(logging, log_level.upper(), logging.INFO)
        
        if log_format is None:
            log_format = LOG_FORMAT
        
        package_logger = logging.getLogger("tcxedit")
        package_logger.setLevel(numeric_level)
        formatter = logging.Formatter(log_format, datefmt=LOG_DATE_FORMAT)
        
        if enable_console:
            console_handler = logging.StreamHandler(sys.stdout)
            console_handler.setLevel(numeric_level)
            console_handler.setFormatter(formatter)
            package_logger.addHandler(console_handler)
        
        if log_file:
            log_path = Path(log_file)
            log_path.parent.mkdir(parents=True, exist_ok=True)
            
            file_handler = logging.FileHandler(log_file)
            file_handler.setLevel(numeric_level)
            file_handler.setFormatter(formatter)
            package_logger.addHandler(file_handler)
        
        cls._initialized = True
        package_logger.debug(f"Logging initialized - Level: {log_level}")
    
    @classmethod
    def reset(cls) -> None:
        """Drop handlers installed by setup_logging so it can run again"""
        package_logger = logging.getLogger("tcxedit")
        for handler in list(package_logger.handlers):
            package_logger.removeHandler(handler)
            handler.close()
        cls._initialized = False
    
    @classmethod
    def get_logger(cls, name: str = None) -> logging.Logger:
        """Get a logger instance"""
        if not cls._initialized:
            cls.setup_logging()
        
        if name:
            return logging.getLogger(name)
        return logging.getLogger("tcxedit")


def setup_tcxedit_logging(log_level: str = "INFO", 
                          log_dir: Optional[str] = None) -> None:
    """Setup logging for the tcxedit package"""
    log_file = None
    if log_dir:
        log_dir_path = Path(log_dir)
        log_dir_path.mkdir(parents=True, exist_ok=True)
        log_file = str(log_dir_path / "tcxedit.log")
    
    LoggingConfig.setup_logging(
        log_level=log_level,
        log_file=log_file,
        log_format=LOG_FORMAT
    )


def get_logger(module_name: str) -> logging.Logger:
    """Get a logger for a specific module"""
    return LoggingConfig.get_logger(module_name)
