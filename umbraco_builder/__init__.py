"""umbraco-builder: provisions an Umbraco site through the Management API."""

__version__ = "0.1.0"
