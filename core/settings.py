"""
Core Settings
Configuration globale de l'application
"""
import os
from pathlib import Path
from typing import Any, Dict, List, Optional

import yaml

from domain.entities import DiffOptions


VIEW_MODES = ("side-by-side", "inline", "unified")
LOG_LEVELS = {"TRACE", "DEBUG", "INFO", "SUCCESS", "WARNING", "ERROR", "CRITICAL"}


class Settings:
    """Paramètres globaux de l'application"""

    def __init__(
        self,
        config_path: str = "config/settings.yaml",
        *,
        project_root: Optional[Path] = None,
    ):
        self.project_root = (project_root or Path.cwd()).resolve()
        config = Path(config_path)
        self.config_path = config if config.is_absolute() else self.project_root / config
        self.logs_dir = self.project_root / "logs"

        # Options de comparaison par défaut
        self.ignore_whitespace: bool = False
        self.ignore_case: bool = False
        self.trim_lines: bool = False

        # Affichage
        self.view: str = "side-by-side"
        self.max_display_lines: int = 500

        # Garde sur la taille des entrées (coût quadratique)
        self.max_input_lines: int = 5000

        # Journalisation
        self.log_level: str = "INFO"
        self.log_to_file: bool = False

        # Avertissements rencontrés au chargement
        self.load_errors: List[str] = []

        self.metadata = {
            "version": "1.0.0",
            "project_name": "diffkit"
        }

        self._load_config()

        env_level = os.getenv("DIFFKIT_LOG_LEVEL")
        if env_level and env_level.upper() in LOG_LEVELS:
            self.log_level = env_level.upper()

    def _load_config(self) -> None:
        """Charge la configuration depuis le fichier YAML"""
        if not self.config_path.exists():
            return

        try:
            with open(self.config_path, 'r', encoding='utf-8') as f:
                config = yaml.safe_load(f)
        except (OSError, yaml.YAMLError) as e:
            # Si erreur, on garde les valeurs par défaut
            self.load_errors.append(f"Cannot load {self.config_path}: {e}")
            return

        if not config:
            return
        if not isinstance(config, dict):
            self.load_errors.append(f"{self.config_path}: top-level mapping expected")
            return

        diff_section = config.get('diff') or {}
        if isinstance(diff_section, dict):
            self.ignore_whitespace = self._read(diff_section, 'ignore_whitespace', bool, self.ignore_whitespace)
            self.ignore_case = self._read(diff_section, 'ignore_case', bool, self.ignore_case)
            self.trim_lines = self._read(diff_section, 'trim_lines', bool, self.trim_lines)
            self.max_display_lines = self._read(diff_section, 'max_display_lines', int, self.max_display_lines)
            self.max_input_lines = self._read(diff_section, 'max_input_lines', int, self.max_input_lines)

            view = self._read(diff_section, 'view', str, self.view)
            if view in VIEW_MODES:
                self.view = view
            else:
                self.load_errors.append(f"diff.view: unknown view '{view}'")

        logging_section = config.get('logging') or {}
        if isinstance(logging_section, dict):
            level = str(logging_section.get('level', self.log_level)).upper()
            if level in LOG_LEVELS:
                self.log_level = level
            else:
                self.load_errors.append(f"logging.level: unknown level '{level}'")
            self.log_to_file = self._read(logging_section, 'to_file', bool, self.log_to_file)

    def _read(self, section: Dict[str, Any], key: str, expected: type, default: Any) -> Any:
        """Lit une clé typée, garde la valeur par défaut si le type ne convient pas"""
        if key not in section:
            return default
        value = section[key]
        # bool est une sous-classe de int
        if not isinstance(value, expected) or (expected is int and isinstance(value, bool)):
            self.load_errors.append(
                f"{key}: expected {expected.__name__}, got {type(value).__name__}"
            )
            return default
        return value

    def diff_options(self) -> DiffOptions:
        """Options de comparaison configurées"""
        return DiffOptions(
            ignore_whitespace=self.ignore_whitespace,
            ignore_case=self.ignore_case,
            trim_lines=self.trim_lines,
        )


_SETTINGS_CACHE: Dict[str, Settings] = {}


def get_settings(workspace: Path | str | None = None) -> Settings:
    """Fabrique paresseuse de Settings basée sur le workspace."""

    key = str(Path(workspace).resolve()) if workspace else "__default__"
    if key in _SETTINGS_CACHE:
        return _SETTINGS_CACHE[key]

    root = Path(workspace).resolve() if workspace else Path.cwd().resolve()
    settings = Settings(project_root=root)
    _SETTINGS_CACHE[key] = settings
    return settings


def load_settings(config_path: str, workspace: Path | str | None = None) -> Settings:
    """Charge un fichier de configuration explicite, sans passer par le cache"""
    root = Path(workspace).resolve() if workspace else None
    return Settings(config_path, project_root=root)


# Instance globale par défaut
settings = get_settings()
