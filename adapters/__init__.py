"""
Adapters package - External service connections.
"""

from adapters import mail_adapter

__all__ = [
    "mail_adapter",
]
