"""Generate Angular entity modules from JDL domain models."""

__version__ = "0.3.0"
