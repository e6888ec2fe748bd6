"""Journal Guru: FastAPI REST API layer.

This package contains the FastAPI application, Pydantic request/response
models, and the prompt generation handler.

Modules
-------
main
    FastAPI application factory, route handlers and the ``main()`` CLI
    entry point.
models
    Pydantic models for API request and response bodies.
handler
    Framework-independent prompt generation handler shared with the UI.
"""
