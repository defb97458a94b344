"""
Decorators for audit logging and performance monitoring.
"""
import functools
import logging
import os
import time
from datetime import datetime
from typing import Any, Callable
from contextlib import contextmanager

# Configure audit logger separately from main app logger
audit_logger = logging.getLogger('sat_package_reader.audit')
perf_logger = logging.getLogger('sat_package_reader.performance')


def _describe_package(args: tuple, kwargs: dict) -> str:
    """Short description of the package a call works on"""
    candidates = list(args) + list(kwargs.values())
    for value in candidates:
        if hasattr(value, 'filename') and isinstance(value.filename, str):
            return value.filename
        if isinstance(value, (str, os.PathLike)):
            return str(value)
        if isinstance(value, (bytes, bytearray)):
            return f"<{len(value)} bytes>"
    return "N/A"


def audit_log(func: Callable) -> Callable:
    """
    Decorator that logs calls opening or reading packages, with their outcome.

    Usage:
        @audit_log
        def create_from_file(cls, filename):
            ...
    """
    @functools.wraps(func)
    def wrapper(*args, **kwargs):
        func_name = func.__qualname__
        package = _describe_package(args, kwargs)

        audit_logger.info(
            f"CALL | {func_name} | Package: {package} | "
            f"Timestamp: {datetime.now().isoformat()}"
        )

        try:
            result = func(*args, **kwargs)

            if hasattr(result, 'filename'):
                package = result.filename
            audit_logger.info(
                f"SUCCESS | {func_name} | Package: {package}"
            )

            return result

        except Exception as e:
            audit_logger.error(
                f"FAILURE | {func_name} | Package: {package} | "
                f"Error: {str(e)}"
            )
            raise

    return wrapper


def measure_performance(func: Callable) -> Callable:
    """
    Decorator to measure and log function execution time.

    Usage:
        @measure_performance
        def to_snapshot(self):
            ...
    """
    @functools.wraps(func)
    def wrapper(*args, **kwargs) -> Any:
        start_time = time.perf_counter()

        try:
            result = func(*args, **kwargs)

            elapsed_ms = (time.perf_counter() - start_time) * 1000
            perf_logger.debug(
                f"{func.__qualname__} completed in {elapsed_ms:.2f}ms"
            )

            return result

        except Exception as e:
            elapsed_ms = (time.perf_counter() - start_time) * 1000
            perf_logger.warning(
                f"{func.__qualname__} failed after {elapsed_ms:.2f}ms: {str(e)}"
            )
            raise

    return wrapper


@contextmanager
def performance_context(operation_name: str):
    """
    Context manager for measuring code block performance.

    Usage:
        with performance_context("identifier index"):
            reader.identifier_index()
    """
    start = time.perf_counter()
    try:
        yield
    finally:
        elapsed = (time.perf_counter() - start) * 1000
        perf_logger.debug(f"{operation_name}: {elapsed:.2f}ms")
