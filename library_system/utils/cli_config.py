"""
CLI Configuration Manager for the Library System CLI
Manages user preferences for the interactive menu
"""

import copy
import json
import logging
from pathlib import Path
from typing import Dict, Any, Optional
from rich.console import Console
from rich.tree import Tree

from library_system.config import settings

logger = logging.getLogger(__name__)

console = Console()

DEFAULT_CONFIG: Dict[str, Any] = {
    "preferences": {
        "default_output_mode": "plain",
        "default_sort": "id",
        "show_emojis": True,
    },
    "ui_settings": {
        "border_style": "cyan",
        "clear_screen": True,
    },
}

class CLIConfig:
    """Manages CLI configuration and user preferences."""

    def __init__(self, config_dir: Optional[Path] = None):
        self.config_dir = Path(config_dir) if config_dir else Path(settings.cli_config_dir)
        self.config_file = self.config_dir / "config.json"
        self.config: Dict[str, Any] = {}
        self.load_config()

    def load_config(self) -> None:
        """Load configuration from file or fall back to defaults."""
        if self.config_file.exists():
            try:
                with open(self.config_file, 'r', encoding='utf-8') as f:
                    self.config = json.load(f)
                logger.info(f"Config loaded from {self.config_file}")
            except (OSError, ValueError) as e:
                console.print(f"[yellow]⚠️  Could not load config: {e}[/]")
                self.config = copy.deepcopy(DEFAULT_CONFIG)
        else:
            self.config = copy.deepcopy(DEFAULT_CONFIG)

    def save_config(self) -> None:
        """Save current configuration to file."""
        try:
            self.config_dir.mkdir(parents=True, exist_ok=True)
            with open(self.config_file, 'w', encoding='utf-8') as f:
                json.dump(self.config, f, indent=2, ensure_ascii=False)
        except OSError as e:
            console.print(f"[red]❌ Could not save config: {e}[/]")

    def get(self, key: str, default: Any = None) -> Any:
        """Get configuration value using dot notation (e.g., 'preferences.default_sort')."""
        value: Any = self.config
        for k in key.split('.'):
            if isinstance(value, dict) and k in value:
                value = value[k]
            else:
                return default
        return value

    def set(self, key: str, value: Any) -> None:
        """Set configuration value using dot notation."""
        keys = key.split('.')
        config = self.config

        # Navigate to the parent dictionary
        for k in keys[:-1]:
            if not isinstance(config.get(k), dict):
                config[k] = {}
            config = config[k]

        config[keys[-1]] = value
        self.save_config()

    def reset_to_default(self) -> None:
        """Reset configuration to default values."""
        self.config = copy.deepcopy(DEFAULT_CONFIG)
        self.save_config()
        console.print("[green]✅ Configuration reset to default values[/]")

    def show_config(self) -> None:
        """Display current configuration."""
        tree = Tree("📄 Library CLI Configuration", style="bold blue")

        for section, values in self.config.items():
            section_tree = tree.add(f"[bold cyan]{section.title()}[/]")
            if isinstance(values, dict):
                for key, value in values.items():
                    section_tree.add(f"[yellow]{key}[/]: [white]{value}[/]")
            else:
                section_tree.add(f"[white]{values}[/]")

        console.print(tree)
        console.print(f"\n[dim]Config file: {self.config_file}[/]")

def parse_value(value: str) -> Any:
    """Dize değerlerini uygun türlere dönüştür."""
    if value.lower() in ('true', 'false'):
        return value.lower() == 'true'
    if value.isdigit():
        return int(value)
    return value
