"""Custom exceptions for poco2csla."""


class Poco2CslaError(Exception):
    """Base exception for all poco2csla errors."""

    pass


# Configuration Errors
class ConfigurationError(Poco2CslaError):
    """Raised when configuration is invalid or cannot be loaded."""

    pass


# Parsing Errors
class ParseError(Poco2CslaError):
    """Raised when source text cannot be handed to the C# parser."""

    pass


class StructuralError(Poco2CslaError):
    """Raised when a source unit does not hold exactly one namespace and one class."""

    pass


# Input/Output Errors
class InputValidationError(Poco2CslaError):
    """Raised when input validation fails."""

    pass


class FileOperationError(Poco2CslaError):
    """Raised when file operations fail."""

    pass
