"""
Appointment Manager

Medical appointment scheduling service.
"""

__version__ = "0.1.0"
