"""nitrapi-cli: typed client and CLI for the Nitrado REST API."""

__version__ = "0.1.0"
