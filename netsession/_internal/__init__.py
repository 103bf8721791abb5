"""Internal modules for netsession.

WARNING: These are implementation details of NetworkSession and the request
models. They are not intended for direct use in application code.

Modules:
    multipart - multipart/form-data body encoding
    resolver - URL, method and header resolution
    decoding - JSON response decoding
    http - Shared HTTP client configuration
    scheduling - Default event loop for callback delivery
    debug - Debug logging
"""
