"""Attempt counter adapters.

The dispatcher depends on the abstract counter so tests and alternative
stores can supply their own table without touching the HTTP layer.
"""
