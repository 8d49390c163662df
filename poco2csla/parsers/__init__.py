"""Source parsers for poco2csla."""

from .csharp_parser import CSharpParser, ParsedSource

__all__ = ["CSharpParser", "ParsedSource"]
