"""Signal-based text transfer between processes, with the helpers it is built on."""

__version__ = "1.0.0"