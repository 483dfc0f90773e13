"""Git hooks manager driven by a YAML configuration file."""

__version__ = "0.1.0"