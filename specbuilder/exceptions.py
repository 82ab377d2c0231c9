"""
Custom exception classes.

Raised by the loading and CLI layers. The builder core itself does not raise
for partial input; it substitutes defaults or skips events.
"""


class SpecBuilderError(Exception):
    """Base exception class for the spec builder."""

    pass


class SpecNotFoundError(SpecBuilderError):
    """Raised when the spec file does not exist."""

    def __init__(self, path):
        self.path = path
        super().__init__(f"Spec file not found: {path}")


class SpecFormatError(SpecBuilderError):
    """Raised when the spec cannot be parsed into an abstract spec."""

    def __init__(self, source, cause: Exception):
        self.source = source
        self.cause = cause
        super().__init__(f"Invalid spec {source}: {cause}")


class UnknownVariantError(SpecBuilderError):
    """Raised when an unsupported output variant is requested."""

    def __init__(self, variant: str):
        self.variant = variant
        super().__init__(f"Unknown output variant: {variant}")
