"""Internal modules for Lambda Cloud SDK.

WARNING: These are not intended for direct use in application code.

Modules:
    fetcher - Request dispatch and response classification
    http - Shared HTTP client configuration
    redaction - Secret masking for debug output
"""
