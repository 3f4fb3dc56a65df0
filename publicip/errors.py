from __future__ import annotations


class PublicIPError(Exception):
    """Base class for errors raised by publicip."""


class FetchError(PublicIPError):
    """The public IP address could not be obtained."""


class PersistError(PublicIPError):
    """The IP address could not be written to its destination."""


class SettingsError(PublicIPError):
    """Configuration file or environment values are invalid."""
