from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class WizardSessionKeys:
    """Namespaced session-state keys for one wizard instance."""

    wizard_id: str

    @property
    def prefix(self) -> str:
        return f"wiz:{self.wizard_id}:"

    def namespace(self, key: str) -> str:
        return f"{self.prefix}{key}"

    @property
    def state(self) -> str:
        return self.namespace("state")

    def widget(self, field: str) -> str:
        """Return the widget key bound to ``field``."""

        return self.namespace(f"field:{field}")

    def owns(self, key: object) -> bool:
        return isinstance(key, str) and key.startswith(self.prefix)
