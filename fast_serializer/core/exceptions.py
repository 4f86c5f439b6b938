"""Exception classes for fast-serializer."""


class SerializerError(Exception):
    """Base exception for all fast-serializer errors."""

    pass


class UnsupportedFormatError(SerializerError, ValueError):
    """Raised when no encoder or decoder accepts the requested format."""

    def __init__(self, format: str, operation: str = "Serialization"):
        self.format = format
        self.operation = operation
        super().__init__(f"{operation} for the format {format} is not supported")


class NoNormalizerRegisteredError(SerializerError):
    """Raised when a typed value is (de)normalized without any normalizer."""

    pass


class UnsupportedTypeError(SerializerError, TypeError):
    """Raised when no normalizer or denormalizer accepts a type."""

    def __init__(self, message: str, type_name: str | None = None):
        self.type_name = type_name
        super().__init__(message)


class UnnormalizableValueError(SerializerError, ValueError):
    """Raised for values that can never be normalized, such as functions."""

    def __init__(self, rendering: str):
        self.rendering = rendering
        super().__init__(f"An unexpected value could not be normalized: {rendering}")


class EncodingError(SerializerError, ValueError):
    """Raised when an encoder cannot turn data into a string."""

    def __init__(self, format: str, reason: str):
        self.format = format
        super().__init__(f"Could not encode data as {format}: {reason}")


class DecodingError(SerializerError, ValueError):
    """Raised when a decoder receives malformed input."""

    def __init__(self, format: str, reason: str):
        self.format = format
        super().__init__(f"Could not decode {format} input: {reason}")
