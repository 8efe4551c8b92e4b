"""
Infrastructure layer: HTTP transport, CSRF handling and normalization.
"""
