"""
callbooking - weekly availability and booking confirmation for a scheduling API.
"""

__version__ = "0.1.0"
