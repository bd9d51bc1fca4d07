"""TaskVault - a local task manager with rudimentary user accounts."""

__version__ = "0.1.0"
