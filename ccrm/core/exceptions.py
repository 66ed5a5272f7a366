"""
Custom exceptions for the CCRM platform.
"""

from typing import Optional, Any, Dict


class CCRMException(Exception):
    """Base exception for all CCRM-related errors."""
    
    def __init__(self, message: str, error_code: Optional[str] = None, details: Optional[Dict[str, Any]] = None):
        super().__init__(message)
        self.message = message
        self.error_code = error_code
        self.details = details or {}


class NotFoundError(CCRMException):
    """Raised when a referenced student or course does not exist."""
    pass


class InvalidGradeError(CCRMException):
    """Raised when a grade token is outside the fixed grade scale."""
    pass


class ValidationError(CCRMException):
    """Raised when data validation fails."""
    pass


class PersistenceError(CCRMException):
    """Raised when import, export or backup operations fail."""
    pass


class ConfigurationError(CCRMException):
    """Raised when configuration is invalid."""
    pass
