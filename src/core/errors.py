from __future__ import annotations


class ScannerError(Exception):
    """Base class for errors surfaced to the user."""


class ValidationError(ScannerError):
    """A scan was requested without a usable scan path."""


class PickerError(ScannerError):
    """The directory-selection dialog could not be opened."""


class ScanError(ScannerError):
    """The scan operation itself failed."""
