"""Panela - role-based access control for the inventory and sales dashboard."""

__version__ = "0.1.0"
