"""Configuration layer — settings and logging setup.

Nothing here runs at import time; applications opt in explicitly.
"""
