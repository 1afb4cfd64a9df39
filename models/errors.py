"""Precondition errors raised by buffers and filters."""


class InvalidDimension(ValueError):
    """Zero-sized image, or smaller than the minimum the filter accepts."""


class OutOfBounds(IndexError):
    """Requested element or view rectangle lies outside the buffer."""
