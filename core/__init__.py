"""
Core module for shared domain infrastructure.

This module contains:
- Domain exceptions and value objects
- License key cryptography (encryption and lookup tags)
- Middleware components
- Health check views
"""
