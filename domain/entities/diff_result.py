"""
Domain Entity: DiffResult
Représente le résultat d'une comparaison de deux textes
"""
from dataclasses import dataclass, field
from typing import Any, Dict, Mapping, Optional, Tuple
from enum import Enum


class DiffType(Enum):
    """Type de modification"""
    ADDED = "added"
    REMOVED = "removed"
    MODIFIED = "modified"
    UNCHANGED = "unchanged"


@dataclass(frozen=True)
class LineNumber:
    """Numéros de ligne (1-indexés) côté gauche et côté droit"""
    left: Optional[int]
    right: Optional[int]

    def to_dict(self) -> Dict[str, Optional[int]]:
        return {"left": self.left, "right": self.right}


@dataclass(frozen=True)
class DiffLine:
    """
    Représente une ligne du diff.

    `content` est toujours le texte source brut (jamais normalisé).
    `old_content` n'est renseigné que pour une ligne MODIFIED.
    """
    type: DiffType
    line_number: LineNumber
    content: str
    old_content: Optional[str] = None

    def to_dict(self) -> Dict[str, Any]:
        """Convertit la ligne en dictionnaire"""
        data: Dict[str, Any] = {
            "type": self.type.value,
            "lineNumber": self.line_number.to_dict(),
            "content": self.content,
        }
        if self.old_content is not None:
            data["oldContent"] = self.old_content
        return data


@dataclass(frozen=True)
class DiffStats:
    """Compteurs agrégés d'un diff"""
    additions: int = 0
    deletions: int = 0
    modifications: int = 0
    unchanged: int = 0
    total_left: int = 0
    total_right: int = 0

    @property
    def total_changes(self) -> int:
        return self.additions + self.deletions + self.modifications

    def get_summary(self) -> str:
        """Retourne un résumé du diff"""
        if self.total_changes == 0:
            return "No changes"
        return f"+{self.additions} -{self.deletions} ~{self.modifications}"

    def to_dict(self) -> Dict[str, int]:
        return {
            "additions": self.additions,
            "deletions": self.deletions,
            "modifications": self.modifications,
            "unchanged": self.unchanged,
            "totalLeft": self.total_left,
            "totalRight": self.total_right,
        }


@dataclass(frozen=True)
class DiffResult:
    """
    Représente le résultat complet d'une comparaison entre deux textes.
    Produit à chaque appel, jamais modifié ni persisté par le moteur.
    """
    lines: Tuple[DiffLine, ...] = ()
    stats: DiffStats = field(default_factory=DiffStats)

    @property
    def has_changes(self) -> bool:
        return self.stats.total_changes > 0

    def get_summary(self) -> str:
        """Retourne un résumé du diff"""
        return self.stats.get_summary()

    def to_dict(self) -> Dict[str, Any]:
        """Convertit le résultat en dictionnaire"""
        return {
            "lines": [line.to_dict() for line in self.lines],
            "stats": self.stats.to_dict(),
        }


@dataclass(frozen=True)
class DiffOptions:
    """
    Options de comparaison. N'affectent que le test d'égalité utilisé
    pendant l'alignement, jamais le contenu émis.
    """
    ignore_whitespace: bool = False
    ignore_case: bool = False
    trim_lines: bool = False

    _KEYS = {
        "ignoreWhitespace": "ignore_whitespace",
        "ignore_whitespace": "ignore_whitespace",
        "ignoreCase": "ignore_case",
        "ignore_case": "ignore_case",
        "trimLines": "trim_lines",
        "trim_lines": "trim_lines",
    }

    @classmethod
    def from_dict(cls, data: Optional[Mapping[str, Any]]) -> "DiffOptions":
        """
        Crée des options à partir d'un dictionnaire.

        Accepte les clés camelCase (`ignoreWhitespace`, `ignoreCase`,
        `trimLines`) et snake_case. Les clés inconnues sont ignorées.
        """
        values: Dict[str, bool] = {}
        for key, value in (data or {}).items():
            attr = cls._KEYS.get(key)
            if attr:
                values[attr] = bool(value)
        return cls(**values)

    def to_dict(self) -> Dict[str, bool]:
        return {
            "ignoreWhitespace": self.ignore_whitespace,
            "ignoreCase": self.ignore_case,
            "trimLines": self.trim_lines,
        }


@dataclass(frozen=True)
class CharDiffSegment:
    """Suite maximale de caractères partageant le même état de surbrillance"""
    text: str
    highlighted: bool

    def to_dict(self) -> Dict[str, Any]:
        return {"text": self.text, "highlighted": self.highlighted}


@dataclass(frozen=True)
class CharDiffResult:
    """Segments caractère par caractère de l'ancien et du nouveau texte"""
    old_segments: Tuple[CharDiffSegment, ...] = ()
    new_segments: Tuple[CharDiffSegment, ...] = ()

    def to_dict(self) -> Dict[str, Any]:
        return {
            "oldSegments": [s.to_dict() for s in self.old_segments],
            "newSegments": [s.to_dict() for s in self.new_segments],
        }


@dataclass(frozen=True)
class SideBySideLine:
    """Une ligne d'un des deux panneaux de la vue côte à côte"""
    type: DiffType
    line_number: Optional[int]
    content: str

    def to_dict(self) -> Dict[str, Any]:
        return {"type": self.type.value, "lineNumber": self.line_number, "content": self.content}


@dataclass(frozen=True)
class SideBySideResult:
    """Deux séquences parallèles de même longueur"""
    left: Tuple[SideBySideLine, ...] = ()
    right: Tuple[SideBySideLine, ...] = ()

    def rows(self):
        return zip(self.left, self.right)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "left": [line.to_dict() for line in self.left],
            "right": [line.to_dict() for line in self.right],
        }


@dataclass(frozen=True)
class InlineLine:
    """Une ligne de la vue unifiée, avec son préfixe ' ', '+' ou '-'"""
    type: DiffType
    line_number: LineNumber
    content: str
    prefix: str

    def render(self) -> str:
        return f"{self.prefix}{self.content}"

    def to_dict(self) -> Dict[str, Any]:
        return {
            "type": self.type.value,
            "lineNumber": self.line_number.to_dict(),
            "content": self.content,
            "prefix": self.prefix,
        }
