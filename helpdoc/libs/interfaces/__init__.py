"""Protocols and data types shared by providers and catalog stages."""
