"""Shared-secret capability check for privileged data."""

from dataclasses import dataclass


@dataclass(frozen=True)
class AdminAccess:
    """Decides whether a supplied secret grants admin capabilities."""

    admin_password: str

    def is_authorized(self, supplied: str | None) -> bool:
        """Return True when ``supplied`` matches the configured password.

        An empty or missing secret never matches, even if the configured
        password is empty too.
        """
        if not supplied or not self.admin_password:
            return False
        return supplied == self.admin_password
