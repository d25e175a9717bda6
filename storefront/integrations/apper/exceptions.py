# ============================================================================
# Description: Excepciones de transporte para el cliente HTTP de Apper.
# ============================================================================
"""
Apper Client Exceptions.

Single Responsibility: Define exception types for Apper transport failures.
"""


class ApperClientError(Exception):
    """Base error for any failed exchange with the Apper API."""

    pass


class ApperConnectionError(ApperClientError):
    """Connection refused, DNS failure or request timeout."""

    pass


class ApperHttpError(ApperClientError):
    """
    Non-2xx HTTP status from the Apper API.

    The records API reports business failures inside a 200 envelope
    (success=false), so a non-2xx status always means transport trouble.
    """

    def __init__(self, status_code: int, body_preview: str):
        self.status_code = status_code
        self.body_preview = body_preview
        super().__init__(f"Apper API returned status {status_code}: {body_preview}")


class ApperResponseError(ApperClientError):
    """Response body is not a valid Apper envelope."""

    pass
