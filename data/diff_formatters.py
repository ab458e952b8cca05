"""
Data Layer: Diff Formatters
Projections d'un DiffResult : côte à côte, inline et diff unifié texte
"""
from typing import List

from domain.entities import (
    DiffResult,
    DiffType,
    InlineLine,
    LineNumber,
    SideBySideLine,
    SideBySideResult,
)


_PREFIXES = {
    DiffType.UNCHANGED: " ",
    DiffType.ADDED: "+",
    DiffType.REMOVED: "-",
}


def format_side_by_side(diff_result: DiffResult) -> SideBySideResult:
    """
    Formate le diff pour une vue côte à côte.

    Args:
        diff_result: Le résultat du diff

    Returns:
        Deux séquences parallèles de même longueur (gauche, droite)
    """
    left: List[SideBySideLine] = []
    right: List[SideBySideLine] = []

    for line in diff_result.lines:
        if line.type == DiffType.UNCHANGED:
            left.append(SideBySideLine(DiffType.UNCHANGED, line.line_number.left, line.content))
            right.append(SideBySideLine(DiffType.UNCHANGED, line.line_number.right, line.content))
        elif line.type == DiffType.ADDED:
            left.append(SideBySideLine(DiffType.ADDED, None, ""))
            right.append(SideBySideLine(DiffType.ADDED, line.line_number.right, line.content))
        elif line.type == DiffType.REMOVED:
            left.append(SideBySideLine(DiffType.REMOVED, line.line_number.left, line.content))
            right.append(SideBySideLine(DiffType.REMOVED, None, ""))
        else:
            left.append(SideBySideLine(DiffType.MODIFIED, line.line_number.left, line.old_content or ""))
            right.append(SideBySideLine(DiffType.MODIFIED, line.line_number.right, line.content))

    return SideBySideResult(left=tuple(left), right=tuple(right))


def format_inline(diff_result: DiffResult) -> List[InlineLine]:
    """
    Formate le diff pour une vue inline/unifiée.

    Une ligne modifiée devient une suppression (ancien contenu) suivie
    d'un ajout (nouveau contenu).
    """
    result: List[InlineLine] = []

    for line in diff_result.lines:
        if line.type == DiffType.MODIFIED:
            result.append(InlineLine(
                type=DiffType.REMOVED,
                line_number=LineNumber(left=line.line_number.left, right=None),
                content=line.old_content or "",
                prefix="-",
            ))
            result.append(InlineLine(
                type=DiffType.ADDED,
                line_number=LineNumber(left=None, right=line.line_number.right),
                content=line.content,
                prefix="+",
            ))
        else:
            result.append(InlineLine(
                type=line.type,
                line_number=line.line_number,
                content=line.content,
                prefix=_PREFIXES[line.type],
            ))

    return result


def render_unified_diff(
    diff_result: DiffResult,
    left_label: str = "Original",
    right_label: str = "Modified",
) -> str:
    """
    Génère un diff unifié (façon git diff) à partir d'un résultat déjà calculé.

    Toute la comparaison tient dans un seul hunk.
    """
    lines = [
        f"--- {left_label}",
        f"+++ {right_label}",
        f"@@ -1,{diff_result.stats.total_left} +1,{diff_result.stats.total_right} @@",
    ]
    lines.extend(line.render() for line in format_inline(diff_result))
    return "\n".join(lines)
