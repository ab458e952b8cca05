"""
Presentation Layer: CLI
Interface en ligne de commande principale
"""
import json
from pathlib import Path
from typing import Optional

import typer
from rich.console import Console
from rich.markup import escape
from rich.panel import Panel

from core.file_manager import FileManagerError, file_manager
import core.settings as settings_module
from data.char_diff import highlight_char_diff
from data.diff_engine import DiffEngineError, calculate_similarity, check_input_size, compute_diff
from data.diff_formatters import render_unified_diff
from domain.entities import DiffOptions
from presentation.logger import Logger
from presentation.ui_diff_view import UIDiffView, UIDiffViewError


app = typer.Typer(help="DiffKit - Comparaison de textes ligne par ligne et caractère par caractère")
console = Console()


def init_app(config: Optional[Path] = None) -> settings_module.Settings:
    """Charge la configuration active"""
    if config is not None:
        return settings_module.load_settings(str(config))
    return settings_module.get_settings()


def init_logger(active_settings: settings_module.Settings) -> Logger:
    logger = Logger(level=active_settings.log_level, to_file=active_settings.log_to_file,
                    logs_dir=active_settings.logs_dir)
    for warning in active_settings.load_errors:
        logger.log_warning(f"Configuration: {warning}")
    return logger


def fail(logger: Logger, message: str) -> None:
    """Journalise l'erreur, l'affiche et quitte avec le code 1"""
    logger.log_error(message)
    console.print(f"[red]❌ {escape(message)}[/red]")
    raise typer.Exit(code=1)


def flag_or_default(flag: Optional[bool], default: bool) -> bool:
    """Le drapeau de la ligne de commande l'emporte sur la configuration"""
    return default if flag is None else flag


def read_inputs(logger: Logger, active_settings: settings_module.Settings, file1: str, file2: str):
    """Lit les deux fichiers à comparer et vérifie leur taille"""
    try:
        left_text = file_manager.read_file(file1)
        right_text = file_manager.read_file(file2)
        check_input_size(left_text, right_text, active_settings.max_input_lines)
    except FileManagerError as e:
        fail(logger, f"Error reading files: {str(e)}")
    except DiffEngineError as e:
        fail(logger, f"Input too large: {str(e)}")
    return left_text, right_text


@app.command()
def diff(
    file1: str = typer.Argument(..., help="Premier fichier (ancienne version)"),
    file2: str = typer.Argument(..., help="Deuxième fichier (nouvelle version)"),
    view: Optional[str] = typer.Option(None, "--view", help="side-by-side, inline ou unified"),
    ignore_whitespace: Optional[bool] = typer.Option(
        None, "--ignore-whitespace/--no-ignore-whitespace", "-w", help="Ignore les différences d'espaces"
    ),
    ignore_case: Optional[bool] = typer.Option(None, "--ignore-case/--no-ignore-case", "-i", help="Ignore la casse"),
    trim_lines: Optional[bool] = typer.Option(
        None, "--trim-lines/--no-trim-lines", "-t", help="Ignore les espaces en début et fin de ligne"
    ),
    left_label: Optional[str] = typer.Option(None, "--left-label", help="Libellé du premier fichier"),
    right_label: Optional[str] = typer.Option(None, "--right-label", help="Libellé du deuxième fichier"),
    output: Optional[str] = typer.Option(None, "--output", "-o", help="Écrit le diff unifié dans ce fichier"),
    as_json: bool = typer.Option(False, "--json", help="Affiche le résultat au format JSON"),
    no_chars: bool = typer.Option(False, "--no-chars", help="Désactive la surbrillance caractère"),
    config: Optional[Path] = typer.Option(None, "--config", help="Fichier de configuration YAML"),
):
    """
    Affiche le diff entre deux fichiers
    """
    active_settings = init_app(config)
    logger = init_logger(active_settings)

    left_text, right_text = read_inputs(logger, active_settings, file1, file2)

    defaults = active_settings.diff_options()
    options = DiffOptions(
        ignore_whitespace=flag_or_default(ignore_whitespace, defaults.ignore_whitespace),
        ignore_case=flag_or_default(ignore_case, defaults.ignore_case),
        trim_lines=flag_or_default(trim_lines, defaults.trim_lines),
    )
    left_name = left_label or file1
    right_name = right_label or file2

    diff_result = compute_diff(left_text, right_text, options)
    logger.log_diff(diff_result, left_name, right_name)

    if output:
        try:
            file_manager.write_file(output, render_unified_diff(diff_result, left_name, right_name) + "\n")
            logger.log_info(f"Unified diff written to {output}")
        except FileManagerError as e:
            fail(logger, f"Error writing output: {str(e)}")

    if as_json:
        typer.echo(json.dumps(diff_result.to_dict(), ensure_ascii=False, indent=2))
        return

    try:
        UIDiffView(console).display_diff(
            diff_result,
            view=view or active_settings.view,
            left_label=left_name,
            right_label=right_name,
            max_lines=active_settings.max_display_lines,
            highlight_chars=not no_chars,
        )
    except UIDiffViewError as e:
        fail(logger, str(e))


@app.command()
def similarity(
    file1: str = typer.Argument(..., help="Premier fichier"),
    file2: str = typer.Argument(..., help="Deuxième fichier"),
    config: Optional[Path] = typer.Option(None, "--config", help="Fichier de configuration YAML"),
):
    """
    Affiche le pourcentage de ressemblance entre deux fichiers
    """
    active_settings = init_app(config)
    logger = init_logger(active_settings)

    left_text, right_text = read_inputs(logger, active_settings, file1, file2)
    score = calculate_similarity(left_text, right_text)
    logger.log_debug(f"Similarity {file1} / {file2}: {score}%")
    UIDiffView(console).display_similarity(score, file1, file2)


@app.command()
def chars(
    old: str = typer.Argument(..., help="Ancienne version de la ligne"),
    new: str = typer.Argument(..., help="Nouvelle version de la ligne"),
    as_json: bool = typer.Option(False, "--json", help="Affiche les segments au format JSON"),
):
    """
    Surligne les différences caractère par caractère entre deux chaînes
    """
    char_diff = highlight_char_diff(old, new)
    if as_json:
        typer.echo(json.dumps(char_diff.to_dict(), ensure_ascii=False, indent=2))
        return
    UIDiffView(console).display_char_diff(char_diff)


@app.command()
def version():
    """
    Affiche la version de DiffKit
    """
    active_settings = settings_module.get_settings()
    version_info = f"""
DiffKit v{active_settings.metadata.get('version', '1.0.0')}

LCS text diff engine
Line, character, side-by-side and unified views
    """
    console.print(Panel(version_info.strip(), border_style="cyan"))


def main():
    """Point d'entrée principal"""
    app()


if __name__ == "__main__":
    main()
