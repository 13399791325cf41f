"""
Error taxonomy for transaction processing.

Every failure the orchestrator can report is a subclass of
TransactionServiceError. Each class carries the HTTP status it maps to so the
transport layer can translate errors without knowing about individual
failure modes.
"""


class TransactionServiceError(Exception):
    """Base class for all transaction processing failures."""

    status_code = 500

    def __init__(self, message: str):
        self.message = message
        super().__init__(message)


class InvalidRequestError(TransactionServiceError):
    """Raised for malformed input: missing fields, blank ids, non-positive quantity."""

    status_code = 400


class ReferenceNotFoundError(TransactionServiceError):
    """Raised when a customer or product id does not exist in its service."""

    status_code = 400

    def __init__(self, kind: str, reference_id: str, detail: str = ""):
        self.kind = kind
        self.reference_id = reference_id
        self.detail = detail
        message = f"{kind.capitalize()} not found: {reference_id}"
        if detail:
            message = f"{message} ({detail})"
        super().__init__(message)


class LookupUnavailableError(TransactionServiceError):
    """Raised when a lookup service could not confirm whether an entity exists."""

    status_code = 502

    def __init__(self, kind: str, reference_id: str, detail: str):
        self.kind = kind
        self.reference_id = reference_id
        self.detail = detail
        super().__init__(f"{kind.capitalize()} service unavailable for {reference_id}: {detail}")


class PersistenceError(TransactionServiceError):
    """Raised when the durable store fails."""

    status_code = 500


class CacheError(TransactionServiceError):
    """Raised when the cache store fails."""

    status_code = 500


class TransactionNotFoundError(TransactionServiceError):
    """Raised when a transaction id is in neither the cache nor the durable store."""

    status_code = 404

    def __init__(self, transaction_id: str):
        self.transaction_id = transaction_id
        super().__init__(f"Transaction not found: {transaction_id}")
