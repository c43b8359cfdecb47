"""
Exceptions raised at the pso2d API boundary.
"""

import time
from typing import Dict, Any, Optional


class OptimizationError(Exception):
    """Raised when an optimization run is requested with invalid arguments."""

    def __init__(
        self,
        message: str,
        error_type: str = "optimization_error",
        details: Optional[Dict[str, Any]] = None
    ):
        super().__init__(message)
        self.message = message
        self.error_type = error_type
        self.details = details or {}
        self.timestamp = time.time()

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary representation."""
        return {
            "message": self.message,
            "error_type": self.error_type,
            "details": self.details,
            "timestamp": self.timestamp
        }


class ConfigurationError(OptimizationError):
    """Raised for invalid configuration values or unknown names."""

    def __init__(self, message: str, details: Optional[Dict[str, Any]] = None):
        super().__init__(message, error_type="configuration_error", details=details)
