"""Domain layer — period arithmetic and locale notation rules.

This layer depends only on stdlib and python-dateutil.
It must never import from services, commands, output, or config.
"""
