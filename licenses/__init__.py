"""
Licenses module - License key issuance, display and search.

This module handles:
- License key generation and format validation
- License entity holding the encrypted key and its lookup tag
- Issue, reveal and find-by-key flows
"""
