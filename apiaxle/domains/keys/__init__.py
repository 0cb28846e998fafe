"""
Key proxies and key operations.
"""
