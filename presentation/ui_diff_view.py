"""
Presentation Layer: UI Diff View
Affichage des diffs avec Rich
"""
from typing import Iterable, Optional

from rich.console import Console
from rich.markup import escape
from rich.panel import Panel
from rich.syntax import Syntax
from rich.table import Table
from rich.text import Text

from data.char_diff import highlight_char_diff
from data.diff_formatters import format_inline, format_side_by_side, render_unified_diff
from domain.entities import CharDiffResult, CharDiffSegment, DiffResult, DiffType


class UIDiffViewError(Exception):
    """Exception pour les erreurs d'affichage"""
    pass


TYPE_STYLES = {
    DiffType.ADDED: "green",
    DiffType.REMOVED: "red",
    DiffType.MODIFIED: "yellow",
    DiffType.UNCHANGED: "white",
}

HIGHLIGHT_STYLES = {
    "old": "bold white on red",
    "new": "bold white on green",
}


def build_char_text(segments: Iterable[CharDiffSegment], highlight_style: str, base_style: str = "") -> Text:
    """
    Construit un Text Rich à partir de segments caractère.

    Les segments surlignés reçoivent `highlight_style`, les autres `base_style`.
    """
    text = Text()
    for segment in segments:
        text.append(segment.text, style=highlight_style if segment.highlighted else base_style)
    return text


def _number(value: Optional[int]) -> str:
    return "" if value is None else str(value)


class UIDiffView:
    """
    Gestionnaire d'affichage des diffs avec Rich.
    """

    VIEWS = ("side-by-side", "inline", "unified")

    def __init__(self, console: Optional[Console] = None):
        self.console = console or Console()

    def display_diff(
        self,
        diff_result: DiffResult,
        view: str = "side-by-side",
        left_label: str = "Original",
        right_label: str = "Modified",
        max_lines: int = 500,
        highlight_chars: bool = True,
    ) -> None:
        """
        Affiche un diff dans la vue demandée, suivi de ses statistiques.

        Args:
            diff_result: Le résultat du diff à afficher
            view: "side-by-side", "inline" ou "unified"
            left_label: Libellé du texte de gauche
            right_label: Libellé du texte de droite
            max_lines: Nombre maximal de lignes affichées (0 = illimité)
            highlight_chars: Surligne les caractères modifiés des lignes MODIFIED

        Raises:
            UIDiffViewError: Si la vue est inconnue
        """
        if view == "side-by-side":
            self.display_side_by_side(diff_result, left_label, right_label, max_lines, highlight_chars)
        elif view == "inline":
            self.display_inline(diff_result, max_lines)
        elif view == "unified":
            self.display_unified(diff_result, left_label, right_label)
        else:
            raise UIDiffViewError(f"Unknown view '{view}', expected one of {', '.join(self.VIEWS)}")

        self.display_stats(diff_result)

    def display_side_by_side(
        self,
        diff_result: DiffResult,
        left_label: str = "Original",
        right_label: str = "Modified",
        max_lines: int = 500,
        highlight_chars: bool = True,
    ) -> None:
        """Affiche les deux textes en colonnes parallèles"""
        side_by_side = format_side_by_side(diff_result)

        table = Table(show_header=True, header_style="bold magenta", expand=True)
        table.add_column("#", style="dim", justify="right", width=5)
        table.add_column(escape(left_label), ratio=1, overflow="fold")
        table.add_column("#", style="dim", justify="right", width=5)
        table.add_column(escape(right_label), ratio=1, overflow="fold")

        rows = list(side_by_side.rows())
        shown = rows if not max_lines else rows[:max_lines]

        for left, right in shown:
            style = TYPE_STYLES[left.type]
            if left.type == DiffType.MODIFIED and highlight_chars:
                # Surbrillance caractère à la demande, ligne par ligne
                char_diff = highlight_char_diff(left.content, right.content)
                left_text = build_char_text(char_diff.old_segments, HIGHLIGHT_STYLES["old"], style)
                right_text = build_char_text(char_diff.new_segments, HIGHLIGHT_STYLES["new"], style)
            else:
                left_text = Text(left.content, style=style)
                right_text = Text(right.content, style=style)

            table.add_row(_number(left.line_number), left_text, _number(right.line_number), right_text)

        self.console.print(Panel(
            table,
            title="[bold]Diff[/bold]",
            border_style="cyan",
        ))
        self._print_truncation(len(rows), len(shown))

    def display_inline(self, diff_result: DiffResult, max_lines: int = 500) -> None:
        """Affiche le diff en une seule colonne préfixée"""
        inline = format_inline(diff_result)

        table = Table(show_header=True, header_style="bold magenta", expand=True)
        table.add_column("Old", style="dim", justify="right", width=5)
        table.add_column("New", style="dim", justify="right", width=5)
        table.add_column("Contenu", overflow="fold")

        shown = inline if not max_lines else inline[:max_lines]
        for line in shown:
            style = TYPE_STYLES[line.type]
            table.add_row(
                _number(line.line_number.left),
                _number(line.line_number.right),
                Text(line.render(), style=style),
            )

        self.console.print(table)
        self._print_truncation(len(inline), len(shown))

    def display_unified(
        self,
        diff_result: DiffResult,
        left_label: str = "Original",
        right_label: str = "Modified",
    ) -> None:
        """Affiche le diff unifié texte avec coloration syntaxique"""
        unified = render_unified_diff(diff_result, left_label, right_label)
        self.console.print(Syntax(unified, "diff", theme="ansi_dark", word_wrap=True))

    def display_stats(self, diff_result: DiffResult) -> None:
        """Affiche un résumé des compteurs"""
        stats = diff_result.stats
        if not diff_result.has_changes:
            self.console.print("[green]✓ No changes detected[/green]")
            return

        table = Table(show_header=True, header_style="bold")
        table.add_column("Ajouté", style="green")
        table.add_column("Supprimé", style="red")
        table.add_column("Modifié", style="yellow")
        table.add_column("Inchangé", style="dim")
        table.add_column("Lignes", style="cyan")
        table.add_row(
            str(stats.additions),
            str(stats.deletions),
            str(stats.modifications),
            str(stats.unchanged),
            f"{stats.total_left} -> {stats.total_right}",
        )

        self.console.print(Panel(
            table,
            title="[bold]Summary of Changes[/bold]",
            border_style="green",
        ))

    def display_similarity(self, similarity: int, left_label: str = "Original", right_label: str = "Modified") -> None:
        """Affiche le pourcentage de ressemblance"""
        if similarity >= 80:
            style = "green"
        elif similarity >= 40:
            style = "yellow"
        else:
            style = "red"
        self.console.print(f"{escape(left_label)} / {escape(right_label)}: [bold {style}]{similarity}%[/bold {style}] similar")

    def display_char_diff(self, char_diff: CharDiffResult) -> None:
        """Affiche les deux versions d'une ligne avec les caractères modifiés surlignés"""
        old_text = Text("- ", style="red")
        old_text.append_text(build_char_text(char_diff.old_segments, HIGHLIGHT_STYLES["old"]))
        new_text = Text("+ ", style="green")
        new_text.append_text(build_char_text(char_diff.new_segments, HIGHLIGHT_STYLES["new"]))
        self.console.print(old_text)
        self.console.print(new_text)

    def _print_truncation(self, total: int, shown: int) -> None:
        if total > shown:
            self.console.print(f"[dim]... et {total - shown} autres lignes[/dim]")

