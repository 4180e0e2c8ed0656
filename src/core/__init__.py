"""
Core conversion algorithms, domain models, and contracts.

This module contains the foundational building blocks that are independent
of external systems (parsers, transports, storage, etc.).
"""
