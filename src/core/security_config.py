"""Security configuration constants for the NyayaSetu API.

This module centralizes security-related configuration including:
- Sensitive keys that should be sanitized from logs
- Error handling security settings
"""

# Keys redacted from structured logs. Uploaded legal documents routinely carry
# personal data, so raw document text and model prompts are treated as
# sensitive alongside credentials.
SENSITIVE_KEYS: set[str] = {
    # Credentials
    "password",
    "secret",
    "token",
    "authorization",
    "api_key",
    "key",
    "bearer",
    "cookie",
    "set-cookie",
    "x-api-key",
    # Personal data
    "email",
    "phone",
    "address",
    "ip_address",
    # Document payloads
    "content",
    "document_text",
    "prompt",
}

# Production-only error response fields
# In production, error responses should only contain these fields to
# prevent information leakage
PRODUCTION_ERROR_FIELDS: set[str] = {
    "correlation_id",
    "type",
}

# Development error response fields (additional fields allowed in development)
DEVELOPMENT_ERROR_FIELDS: set[str] = PRODUCTION_ERROR_FIELDS | {
    "details",
    "traceback",
    "exception_type",
    "validation_errors",
}


def get_allowed_error_fields(environment: str) -> set[str]:
    """Get allowed error response fields based on environment.

    Args:
        environment: The application environment (production, development, etc.)

    Returns:
        Set of allowed field names for error responses
    """
    if environment == "production":
        return PRODUCTION_ERROR_FIELDS.copy()
    return DEVELOPMENT_ERROR_FIELDS.copy()


def is_sensitive_key(key: str) -> bool:
    """Check if a key should be considered sensitive and redacted."""
    key_lower = key.lower()
    # Generic words only match exactly; everything else matches as a substring.
    if key_lower in SENSITIVE_KEYS:
        return True
    return any(
        sensitive in key_lower
        for sensitive in SENSITIVE_KEYS
        if sensitive not in {"key", "address", "content"}
    )
