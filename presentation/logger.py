"""
Presentation Layer: Logger
Gestion des journaux avec Loguru et Rich
"""
from datetime import datetime
from pathlib import Path
from typing import Optional

from loguru import logger as loguru_logger
from rich.console import Console
from rich.logging import RichHandler

from core.settings import LOG_LEVELS, settings
from data.diff_formatters import render_unified_diff
from domain.entities import DiffResult


def safe_print(text: str) -> str:
    """Supprime les emojis pour compatibilité console Windows"""
    emoji_map = {
        "✅": "[OK]",
        "❌": "[ERROR]",
        "📝": "[DIFF]",
        "ℹ️": "[INFO]",
        "⚠️": "[WARN]",
    }
    for emoji, replacement in emoji_map.items():
        text = text.replace(emoji, replacement)
    return text


class Logger:
    """
    Gestionnaire de logs avec Loguru, affichés via Rich sur stderr.
    Peut aussi écrire un journal Markdown de session.
    """

    def __init__(
        self,
        session_name: Optional[str] = None,
        *,
        level: Optional[str] = None,
        to_file: bool = False,
        logs_dir: Optional[Path] = None,
        console: Optional[Console] = None,
    ):
        self.session_name = session_name or f"session_{datetime.now().strftime('%Y%m%d_%H%M%S')}"
        self.log_dir = Path(logs_dir) if logs_dir else settings.logs_dir
        self.log_file = self.log_dir / f"{self.session_name}.md"
        self.to_file = to_file
        self.console = console or Console(stderr=True)
        self.log_level = self._normalize_level(level or settings.log_level)
        self.rotation_bytes = 2 * 1024 * 1024  # 2 Mo
        self.retention_count = 5

        self._setup_loguru()

    @staticmethod
    def _normalize_level(level: str) -> str:
        normalized = str(level).upper()
        return normalized if normalized in LOG_LEVELS else "INFO"

    def _setup_loguru(self) -> None:
        """Configure Loguru avec Rich handler"""
        loguru_logger.remove()  # Enlève le handler par défaut

        loguru_logger.add(
            RichHandler(console=self.console, rich_tracebacks=True, show_path=False),
            format="{message}",
            level=self.log_level,
        )

        # Handler fichier Markdown
        if self.to_file:
            self.log_dir.mkdir(parents=True, exist_ok=True)
            loguru_logger.add(
                str(self.log_file),
                format="{message}",
                level="DEBUG",
                rotation=self.rotation_bytes,
                retention=self.retention_count,
                encoding="utf-8",
            )

    def log_info(self, message: str) -> None:
        """
        Log un message informatif.

        Args:
            message: Le message
        """
        loguru_logger.info(message)

    def log_debug(self, message: str) -> None:
        loguru_logger.debug(message)

    def log_warning(self, message: str) -> None:
        """
        Log un avertissement.

        Args:
            message: Le message
        """
        loguru_logger.warning(message)

    def log_error(self, message: str) -> None:
        """
        Log une erreur.

        Args:
            message: Le message
        """
        loguru_logger.error(f"Erreur: {message}")

    def log_diff(
        self,
        diff_result: DiffResult,
        left_label: str = "Original",
        right_label: str = "Modified",
    ) -> None:
        """
        Log un diff : le résumé en INFO, le diff unifié complet en DEBUG.

        Args:
            diff_result: Un objet DiffResult
            left_label: Libellé du texte de gauche
            right_label: Libellé du texte de droite
        """
        loguru_logger.info(safe_print(f"📝 Diff: {left_label} -> {right_label} ({diff_result.get_summary()})"))
        content = "```diff\n" + render_unified_diff(diff_result, left_label, right_label) + "\n```"
        loguru_logger.debug(content)

    def get_log_file_path(self) -> str:
        """Retourne le chemin du fichier de log"""
        return str(self.log_file)
