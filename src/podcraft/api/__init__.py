"""Podcraft gateway - FastAPI REST API layer.

Modules
-------
main
    ``create_app()`` application factory with all route handlers and the
    ``main()`` CLI entry point.
models
    Pydantic models for request validation and response serialisation.
"""
