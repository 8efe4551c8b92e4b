"""
Example showing how a front end consumes the client: build it from
configuration, log in, call an action and branch on the result.
"""

from sessiongate import ApiErr, AuthenticatedApiClient
from sessiongate.core.config import ClientConfig, ConfigManager
from sessiongate.logging import configure_logging


def example_from_configuration():
    """Build the client from ~/.config/sessiongate/config.toml and SESSIONGATE_* variables."""
    print("=== Configured Client Example ===\n")

    config = ConfigManager().load_config()
    configure_logging(config.logging)

    with AuthenticatedApiClient.from_config(config.client) as client:
        result = client.login("alice@example.com", "correct horse battery staple")
        if isinstance(result, ApiErr):
            # The error is data: render it, no try/except needed
            print(f"Login failed [{result.code}]: {result.msg}")
            return

        print(f"Logged in: {result.data}")
        print(f"toProcess: {client.to_process(5, {'a': 1}).to_dict()}")
        print(f"Logout: {client.logout().to_dict()}")


def example_explicit_configuration():
    """Point the client at a dev proxy and clear the token when the backend says it is stale."""
    print("\n=== Explicit Configuration Example ===\n")

    config = ClientConfig(
        base_url="http://localhost:4200",
        timeout=10,
        csrf_reset_statuses=[403, 419],
    )
    with AuthenticatedApiClient.from_config(config) as client:
        result = client.to_process(7, "ping")
        print(result.to_dict())

        # After clearing cookies in the backend, force a fresh token
        client.reset_csrf()


if __name__ == "__main__":
    example_from_configuration()
    example_explicit_configuration()
