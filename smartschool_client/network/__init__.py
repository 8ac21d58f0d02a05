"""
Network operations module for HTTP client setup.
"""

from smartschool_client.network.client import build_transport, join_url, validate_base_url

__all__ = ["build_transport", "join_url", "validate_base_url"]
