"""
Data Layer: Diff Engine
Alignement LCS ligne par ligne, détection des modifications et statistiques
"""
import math
import re
from typing import List, Mapping, Sequence, Union

from loguru import logger

from domain.entities import (
    CharDiffResult,
    DiffLine,
    DiffOptions,
    DiffResult,
    DiffStats,
    DiffType,
    InlineLine,
    LineNumber,
    SideBySideResult,
)
from data.char_diff import highlight_char_diff
from data.diff_formatters import format_inline, format_side_by_side, render_unified_diff
from data.lcs import compute_lcs_table


class DiffEngineError(Exception):
    """Exception pour les erreurs de diff engine"""
    pass


class DiffInputTooLargeError(DiffEngineError):
    """Levée quand une entrée dépasse la limite de lignes configurée"""
    pass


OptionsLike = Union[DiffOptions, Mapping[str, bool], None]

_WHITESPACE_RUN = re.compile(r"\s+")


def _coerce_options(options: OptionsLike) -> DiffOptions:
    if isinstance(options, DiffOptions):
        return options
    return DiffOptions.from_dict(options)


def split_lines(text: str) -> List[str]:
    """
    Découpe un texte en lignes.

    `\\r\\n`, `\\r` et `\\n` sont tous traités comme un saut de ligne.
    Une chaîne vide donne une seule ligne vide.
    """
    return text.replace("\r\n", "\n").replace("\r", "\n").split("\n")


def normalize_text(line: str, options: OptionsLike = None) -> str:
    """
    Forme normalisée d'une ligne, utilisée uniquement pour les comparaisons.

    Args:
        line: La ligne brute
        options: Les options de comparaison

    Returns:
        La ligne après trim, compression des espaces et passage en minuscules
    """
    opts = _coerce_options(options)
    normalized = line

    if opts.trim_lines:
        normalized = normalized.strip()

    if opts.ignore_whitespace:
        normalized = _WHITESPACE_RUN.sub(" ", normalized)

    if opts.ignore_case:
        normalized = normalized.lower()

    return normalized


def backtrack_lcs(
    table: List[List[int]],
    left: Sequence[str],
    right: Sequence[str],
    left_compare: Sequence[str],
    right_compare: Sequence[str],
) -> List[DiffLine]:
    """
    Parcourt la table LCS depuis (m, n) et produit les opérations ligne par ligne
    dans l'ordre du document.

    À score égal, un ajout est préféré à une suppression.
    """
    result: List[DiffLine] = []
    i = len(left)
    j = len(right)

    while i > 0 or j > 0:
        if i > 0 and j > 0 and left_compare[i - 1] == right_compare[j - 1]:
            # Le texte brut de droite fait foi
            result.append(DiffLine(
                type=DiffType.UNCHANGED,
                line_number=LineNumber(left=i, right=j),
                content=right[j - 1],
            ))
            i -= 1
            j -= 1
        elif j > 0 and (i == 0 or table[i][j - 1] >= table[i - 1][j]):
            result.append(DiffLine(
                type=DiffType.ADDED,
                line_number=LineNumber(left=None, right=j),
                content=right[j - 1],
            ))
            j -= 1
        else:
            result.append(DiffLine(
                type=DiffType.REMOVED,
                line_number=LineNumber(left=i, right=None),
                content=left[i - 1],
            ))
            i -= 1

    result.reverse()
    return result


def detect_modifications(lines: Sequence[DiffLine]) -> List[DiffLine]:
    """
    Fusionne chaque paire suppression + ajout adjacente en une ligne MODIFIED.

    Seules les paires immédiatement voisines fusionnent : un bloc de k
    suppressions suivi de k ajouts n'est pas réapparié.
    """
    result: List[DiffLine] = []
    i = 0

    while i < len(lines):
        current = lines[i]
        if (
            current.type == DiffType.REMOVED
            and i + 1 < len(lines)
            and lines[i + 1].type == DiffType.ADDED
        ):
            following = lines[i + 1]
            result.append(DiffLine(
                type=DiffType.MODIFIED,
                line_number=LineNumber(
                    left=current.line_number.left,
                    right=following.line_number.right,
                ),
                content=following.content,
                old_content=current.content,
            ))
            i += 2
        else:
            result.append(current)
            i += 1

    return result


def compute_stats(lines: Sequence[DiffLine], total_left: int, total_right: int) -> DiffStats:
    """Compte chaque type de ligne du diff résolu"""
    counts = {diff_type: 0 for diff_type in DiffType}
    for line in lines:
        counts[line.type] += 1

    return DiffStats(
        additions=counts[DiffType.ADDED],
        deletions=counts[DiffType.REMOVED],
        modifications=counts[DiffType.MODIFIED],
        unchanged=counts[DiffType.UNCHANGED],
        total_left=total_left,
        total_right=total_right,
    )


def compute_diff(left_text: str, right_text: str, options: OptionsLike = None) -> DiffResult:
    """
    Calcule le diff entre deux textes.

    Args:
        left_text: L'ancien texte
        right_text: Le nouveau texte
        options: DiffOptions, dictionnaire d'options, ou None

    Returns:
        Un DiffResult contenant les lignes résolues et les statistiques
    """
    if left_text == "" and right_text == "":
        logger.debug("compute_diff: both inputs empty, skipping alignment")
        return DiffResult(lines=(), stats=DiffStats())

    opts = _coerce_options(options)
    left_lines = split_lines(left_text)
    right_lines = split_lines(right_text)

    left_compare = [normalize_text(line, opts) for line in left_lines]
    right_compare = [normalize_text(line, opts) for line in right_lines]

    logger.debug(
        "compute_diff: aligning {} x {} lines (options={})",
        len(left_lines),
        len(right_lines),
        opts.to_dict(),
    )

    table = compute_lcs_table(left_compare, right_compare)
    lines = backtrack_lcs(table, left_lines, right_lines, left_compare, right_compare)
    lines = detect_modifications(lines)

    stats = compute_stats(lines, len(left_lines), len(right_lines))
    return DiffResult(lines=tuple(lines), stats=stats)


def _round_half_up(value: float) -> int:
    return int(math.floor(value + 0.5))


def calculate_similarity(left_text: str, right_text: str, options: OptionsLike = None) -> int:
    """
    Pourcentage de ressemblance (0 à 100) entre deux textes.

    Deux fois le nombre de lignes inchangées, rapporté au total des lignes
    des deux côtés.
    """
    if left_text == right_text:
        return 100
    if left_text == "" and right_text == "":
        return 100
    if left_text == "" or right_text == "":
        return 0

    diff = compute_diff(left_text, right_text, options)
    total = diff.stats.total_left + diff.stats.total_right
    unchanged = diff.stats.unchanged * 2

    return _round_half_up(unchanged / total * 100)


def check_input_size(left_text: str, right_text: str, max_lines: int) -> None:
    """
    Vérifie qu'aucune entrée ne dépasse `max_lines` lignes.

    Le coût de l'alignement est quadratique ; cette garde est destinée aux
    appelants qui lisent des fichiers arbitraires (CLI).

    Raises:
        DiffInputTooLargeError: Si une des deux entrées est trop longue
    """
    if max_lines <= 0:
        return
    for label, text in (("left", left_text), ("right", right_text)):
        count = len(split_lines(text))
        if count > max_lines:
            raise DiffInputTooLargeError(
                f"{label} input has {count} lines, limit is {max_lines}"
            )


def generate_unified_diff(
    left_text: str,
    right_text: str,
    left_label: str = "Original",
    right_label: str = "Modified",
    options: OptionsLike = None,
) -> str:
    """
    Génère un diff unifié (façon git diff) entre deux textes.

    Args:
        left_text: L'ancien texte
        right_text: Le nouveau texte
        left_label: Libellé de la ligne `---`
        right_label: Libellé de la ligne `+++`
        options: Les options de comparaison

    Returns:
        Le diff en texte, un seul hunk `@@ -1,L +1,R @@`
    """
    diff = compute_diff(left_text, right_text, options)
    return render_unified_diff(diff, left_label, right_label)


class DiffEngine:
    """
    Façade du moteur de diff.
    Porte des options par défaut, surchargées appel par appel.
    """

    def __init__(self, options: OptionsLike = None):
        self.options = _coerce_options(options)

    def _resolve(self, options: OptionsLike) -> DiffOptions:
        return self.options if options is None else _coerce_options(options)

    def compute_diff(self, left_text: str, right_text: str, options: OptionsLike = None) -> DiffResult:
        return compute_diff(left_text, right_text, self._resolve(options))

    def highlight_char_diff(self, old_text: str, new_text: str) -> CharDiffResult:
        return highlight_char_diff(old_text, new_text)

    def side_by_side(self, left_text: str, right_text: str, options: OptionsLike = None) -> SideBySideResult:
        return format_side_by_side(self.compute_diff(left_text, right_text, options))

    def inline(self, left_text: str, right_text: str, options: OptionsLike = None) -> List[InlineLine]:
        return format_inline(self.compute_diff(left_text, right_text, options))

    def unified_diff(
        self,
        left_text: str,
        right_text: str,
        left_label: str = "Original",
        right_label: str = "Modified",
        options: OptionsLike = None,
    ) -> str:
        return generate_unified_diff(
            left_text, right_text, left_label, right_label, self._resolve(options)
        )

    def similarity(self, left_text: str, right_text: str, options: OptionsLike = None) -> int:
        return calculate_similarity(left_text, right_text, self._resolve(options))


# Instance globale du moteur de diff
diff_engine = DiffEngine()
