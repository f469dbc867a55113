"""
Top-level package for the Contact API.

The web application lives in ``contact_api.app`` and a small HTTP
client for it in ``contact_api.client``.
"""

__all__ = []
