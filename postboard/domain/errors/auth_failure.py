"""Authentication outcome constants shared by handlers and presentation."""


class AuthFailure:
    """Error codes returned by the token service handlers.

    Expected outcomes (everything except ``BACKEND_UNAVAILABLE``) are
    recoverable by the caller and never logged above warning.
    """

    INPUT_ERROR = "input_error"
    INVALID_CREDENTIALS = "invalid_credentials"
    INVALID_SIGNATURE = "invalid_signature"
    TOKEN_EXPIRED = "token_expired"
    UNKNOWN_TOKEN = "unknown_token"
    INVALID_TOKEN = "invalid_token"
    BACKEND_UNAVAILABLE = "backend_unavailable"
    UNAUTHORIZED = "unauthorized"
