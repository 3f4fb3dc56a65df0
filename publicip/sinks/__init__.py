from .base import OutputSink
from .file import FileSink

__all__ = ["OutputSink", "FileSink"]
