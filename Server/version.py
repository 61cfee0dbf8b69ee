"""
Dialog Admin Server - Version Information
"""

SERVICE_NAME = "Dialog Admin Server"
__version__ = "1.0.0"
