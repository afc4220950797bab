"""
HarAmmo

Converts captured HAR archives into size-prefixed raw HTTP request
files for load-testing and replay tools.
"""

__version__ = "0.1.0"
