"""
Data Layer: LCS
Table de programmation dynamique de la plus longue sous-séquence commune
"""
from typing import List, Sequence


def compute_lcs_table(left: Sequence, right: Sequence) -> List[List[int]]:
    """
    Construit la table LCS de deux séquences.

    Utilisée au niveau ligne (lignes normalisées) comme au niveau caractère.
    Coût O(m*n) en temps et en mémoire ; la table n'est pas réutilisée
    d'un appel à l'autre.

    Args:
        left: Séquence gauche
        right: Séquence droite

    Returns:
        Une table (m+1)x(n+1) dont la case [m][n] est la longueur de la LCS
    """
    m = len(left)
    n = len(right)
    table = [[0] * (n + 1) for _ in range(m + 1)]

    for i in range(1, m + 1):
        row = table[i]
        previous = table[i - 1]
        left_item = left[i - 1]
        for j in range(1, n + 1):
            if left_item == right[j - 1]:
                row[j] = previous[j - 1] + 1
            else:
                row[j] = max(previous[j], row[j - 1])

    return table


def lcs_length(left: Sequence, right: Sequence) -> int:
    """Longueur de la plus longue sous-séquence commune"""
    return compute_lcs_table(left, right)[len(left)][len(right)]
