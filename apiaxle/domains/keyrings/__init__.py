"""
Keyring proxies and keyring operations.
"""
