"""Test fixtures for swaglint."""

from .model_factories import (
    make_body_parameter,
    make_document,
    make_operation,
    make_parameter,
    make_response,
)

__all__ = [
    "make_body_parameter",
    "make_document",
    "make_operation",
    "make_parameter",
    "make_response",
]
