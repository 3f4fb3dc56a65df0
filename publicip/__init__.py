"""Look up the host's public IP address and write it to a file."""

from .errors import FetchError, PersistError, PublicIPError, SettingsError
from .execute import execute
from .models import OutputDestination

__all__ = [
    "OutputDestination",
    "execute",
    "PublicIPError",
    "FetchError",
    "PersistError",
    "SettingsError",
]
