"""hdlbox - manage an HDL development container."""

__version__ = "0.3.0"
