"""Threadit - user accounts, sessions, password recovery and posts."""
