"""Service layer — clock-reading formatters and ServiceResult wrappers.

Services may import from domain and config layers.
They must never import from commands or output.
"""
