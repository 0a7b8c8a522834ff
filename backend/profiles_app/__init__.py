"""
Profiles App - profile registration and authentication backed by MongoDB.
"""

__version__ = "0.1.0"
