"""Resource models, builders and list filters for ZFS local persistent volumes."""

__version__ = "0.1.0"