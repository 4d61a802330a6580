from minter.app.core.logging import configure_logging

SERVICE_NAME = "minter"

__all__ = ["SERVICE_NAME", "configure_logging"]
