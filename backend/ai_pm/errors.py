"""
Error Taxonomy
"""


class AIPMError(Exception):
    """Base class for errors converted to HTTP responses"""

    status_code: int = 500

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class ValidationError(AIPMError):
    """Required input missing or malformed"""

    status_code = 400


class UpstreamError(AIPMError):
    """Upstream provider call failed or returned a malformed envelope"""

    status_code = 500


class ParseError(AIPMError):
    """Model output could not be turned into a checklist"""

    status_code = 500
