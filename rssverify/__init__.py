"""RSS feed verifier: batch validation of RSS feed files."""

from rssverify.validation import ValidationResult, validate_document

__all__ = ["ValidationResult", "validate_document"]

__version__ = "1.0.0"
