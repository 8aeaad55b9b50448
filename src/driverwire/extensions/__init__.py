"""Vendor command sets.

Each extension is an independent command enumeration implementing
FormatRequestData, dispatched through WebDriverSession.cmd().
"""

from .chrome import ChromeCommand, ChromeCommandType, ChromeDevTools, NetworkConditions

__all__ = [
    "ChromeCommand",
    "ChromeCommandType",
    "ChromeDevTools",
    "NetworkConditions",
]
