# utils/error_handler.py
from typing import Optional, Dict, Any
import logging
import traceback
from functools import wraps
from datetime import datetime

class GraphError(Exception):
    """Base class for graph analysis errors."""
    def __init__(self, message: str, error_code: str, details: Optional[Dict[str, Any]] = None):
        super().__init__(message)
        self.error_code = error_code
        self.details = details or {}
        self.timestamp = datetime.now()

class GraphLoadError(GraphError):
    """Error raised when an edge list cannot be opened or read."""
    pass

class ConfigurationError(GraphError):
    """Error raised for configuration-related failures."""
    pass

class AnalysisError(GraphError):
    """Error raised for invalid analysis requests."""
    pass

def handle_errors(logger: Optional[logging.Logger] = None,
                  operation: Optional[str] = None,
                  raise_error: bool = True,
                  default_value: Any = None):
    """
    Decorator that logs failures of a pipeline step and tags them with the step name.
    Args:
        logger: Logger instance for error logging
        operation: Step name recorded in the error details; defaults to the function name
        raise_error: Whether to raise the error or return default value
        default_value: Value to return if error occurs and raise_error is False
    """
    def decorator(func):
        step = operation or func.__name__

        def log_failure(error: GraphError):
            if logger:
                logger.error(
                    f"{step} failed [{error.error_code}]: {str(error)}",
                    extra={
                        'operation': step,
                        'error_code': error.error_code,
                        'details': error.details,
                        'traceback': traceback.format_exc()
                    }
                )

        @wraps(func)
        def wrapper(*args, **kwargs):
            try:
                return func(*args, **kwargs)
            except GraphError as e:
                e.details.setdefault('operation', step)
                log_failure(e)
                if raise_error:
                    raise
                return default_value
            except Exception as e:
                error = GraphError(
                    f"{step} failed: {str(e)}",
                    'unexpected_error',
                    {
                        'operation': step,
                        'original_error': type(e).__name__,
                        'original_message': str(e)
                    }
                )
                log_failure(error)
                if raise_error:
                    raise error from e
                return default_value
        return wrapper
    return decorator

def format_error_message(error: GraphError) -> str:
    """Render an error and its details for the console."""
    message = f"{type(error).__name__} ({error.error_code}): {str(error)}"

    for key, value in sorted(error.details.items()):
        message += f"\n  {key}: {value}"

    return message
