"""
Data Layer: Character Diff
Surbrillance des différences caractère par caractère d'une ligne modifiée
"""
from typing import List, Sequence

from domain.entities import CharDiffResult, CharDiffSegment
from data.lcs import compute_lcs_table


def build_segments(chars: Sequence[str], highlight: Sequence[bool]) -> List[CharDiffSegment]:
    """
    Regroupe les caractères consécutifs de même état en segments.

    La concaténation des segments redonne exactement la chaîne d'origine.
    """
    segments: List[CharDiffSegment] = []
    current: List[str] = []
    current_highlighted = highlight[0] if highlight else False

    for char, highlighted in zip(chars, highlight):
        if highlighted != current_highlighted and current:
            segments.append(CharDiffSegment(text="".join(current), highlighted=current_highlighted))
            current = []
        current_highlighted = highlighted
        current.append(char)

    if current:
        segments.append(CharDiffSegment(text="".join(current), highlighted=current_highlighted))

    return segments


def highlight_char_diff(old_text: str, new_text: str) -> CharDiffResult:
    """
    Compare deux chaînes caractère par caractère.

    Les caractères qui appartiennent à la sous-séquence commune ne sont pas
    surlignés ; tous les autres le sont.

    Args:
        old_text: L'ancienne version de la ligne
        new_text: La nouvelle version de la ligne

    Returns:
        Un CharDiffResult avec les segments de chaque côté
    """
    old_chars = list(old_text)
    new_chars = list(new_text)
    table = compute_lcs_table(old_chars, new_chars)

    old_highlight = [True] * len(old_chars)
    new_highlight = [True] * len(new_chars)

    i = len(old_chars)
    j = len(new_chars)
    while i > 0 and j > 0:
        if old_chars[i - 1] == new_chars[j - 1]:
            old_highlight[i - 1] = False
            new_highlight[j - 1] = False
            i -= 1
            j -= 1
        elif table[i - 1][j] > table[i][j - 1]:
            i -= 1
        else:
            j -= 1

    return CharDiffResult(
        old_segments=tuple(build_segments(old_chars, old_highlight)),
        new_segments=tuple(build_segments(new_chars, new_highlight)),
    )
