"""Persistence implementations for threadit_auth.

Available implementations:
- redis: Redis-backed reset token and session stores
"""
