"""Client credentials entity."""

from dataclasses import dataclass, field
from typing import Dict


@dataclass(frozen=True)
class ClientCredentials:
    """
    Immutable TrueLayer client credentials.

    Attributes:
        client_id: TrueLayer client_id
        client_secret: TrueLayer client_secret, never rendered in repr
        sandbox: True when the sandbox environment is used
    """

    client_id: str
    client_secret: str = field(repr=False)
    sandbox: bool = False

    def as_form_fields(self, with_secret: bool) -> Dict[str, str]:
        """
        Client fields for a form body or query string.

        The secret is only included for confidential, server-to-server calls.
        """
        fields = {"client_id": self.client_id}
        if with_secret:
            fields["client_secret"] = self.client_secret
        return fields
