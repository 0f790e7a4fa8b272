"""
Settings manager for digit-groups
Stores user-defined separator policies by name
"""

import json
from pathlib import Path

from rich.console import Console

from .constants import SETTINGS_FILE_NAME
from .policies import PREDEFINED_POLICIES
from .policy import ConfigurationError, SeparatorPolicy

console = Console()

# Config file path
CONFIG_FILE = Path.home() / SETTINGS_FILE_NAME


class SettingsManager:
    """Manages saved separator policies"""

    def __init__(self, config_file: Path | None = None):
        self.config_file = config_file or CONFIG_FILE
        self.settings = self.load_settings()

    def load_settings(self) -> dict:
        """Load settings from file"""
        if self.config_file.exists():
            try:
                with open(self.config_file, 'r', encoding='utf-8') as f:
                    data = json.load(f)
            except Exception as e:
                console.print(f"[yellow]⚠ Error loading settings: {e}[/yellow]")
                return {"policies": {}}
            if not isinstance(data, dict):
                console.print("[yellow]⚠ Error loading settings: expected a JSON object[/yellow]")
                return {"policies": {}}
            return data
        return {"policies": {}}

    def save_settings(self):
        """Save settings to file"""
        try:
            with open(self.config_file, 'w', encoding='utf-8') as f:
                json.dump(self.settings, f, indent=2, ensure_ascii=False)
        except Exception as e:
            console.print(f"[red]❌ Error saving settings: {e}[/red]")

    def add_policy(self, name: str, policy: SeparatorPolicy):
        """Add or update a saved policy"""
        if 'policies' not in self.settings:
            self.settings['policies'] = {}
        self.settings['policies'][name] = policy.to_dict()
        self.save_settings()

    def get_policy(self, name: str) -> SeparatorPolicy | None:
        """
        Get a saved policy

        Raises:
            ConfigurationError: If the stored entry is not a valid policy
        """
        data = self.settings.get('policies', {}).get(name)
        if data is None:
            return None
        if not isinstance(data, dict):
            raise ConfigurationError(name, "saved policy is not a mapping")
        return SeparatorPolicy.from_dict(data)

    def list_policies(self) -> dict[str, dict]:
        """Get all saved policies as raw dicts"""
        return self.settings.get('policies', {})

    def delete_policy(self, name: str) -> bool:
        """Delete a saved policy"""
        if name in self.settings.get('policies', {}):
            del self.settings['policies'][name]
            self.save_settings()
            return True
        return False


def resolve_policy(name: str, settings: SettingsManager | None = None) -> SeparatorPolicy:
    """
    Find a policy by name, predefined ones first, then saved ones

    Raises:
        KeyError: If the name is neither predefined nor saved
        ConfigurationError: If the saved entry is invalid
    """
    predefined = PREDEFINED_POLICIES.get(name.strip().lower())
    if predefined is not None:
        return predefined

    settings = settings or SettingsManager()
    policy = settings.get_policy(name)
    if policy is None:
        raise KeyError(f"Unknown policy: {name}")
    return policy
