"""
Core domain models, pricing primitives, and contracts.

This module contains the foundational building blocks of the shopping cart.
Everything is in-memory and independent of external systems.
"""
