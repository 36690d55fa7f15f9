"""
Base domain exceptions
"""


class DomainException(Exception):
    """Base class for all catalog tooling errors"""

    def __init__(self, message: str, code: str = "DOMAIN_ERROR",
                 details: dict = None):
        super().__init__(message)
        self.message = message
        self.code = code
        self.details = details or {}
