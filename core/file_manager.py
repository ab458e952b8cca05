"""
Core File Manager
Lecture des textes à comparer et export des diffs
"""
from pathlib import Path


class FileManagerError(Exception):
    """Exception générique pour les erreurs de FileManager"""
    pass


class FileManager:
    """
    Gestionnaire de fichiers pour les entrées et sorties de la CLI.
    """

    def read_file(self, file_path: str) -> str:
        """
        Lit le contenu d'un fichier texte.

        Les fins de ligne sont conservées telles quelles ; le moteur
        de diff les normalise lui-même.

        Args:
            file_path: Le chemin du fichier à lire

        Returns:
            Le contenu du fichier

        Raises:
            FileManagerError: Si le fichier ne peut pas être lu
        """
        path = Path(file_path)
        if not path.exists():
            raise FileManagerError(f"File not found: {file_path}")
        if path.is_dir():
            raise FileManagerError(f"Not a file: {file_path}")

        try:
            with open(path, 'r', encoding='utf-8', newline='') as f:
                return f.read()
        except UnicodeDecodeError as e:
            raise FileManagerError(f"Binary or non UTF-8 file: {file_path}") from e
        except PermissionError as e:
            raise FileManagerError(f"Permission denied for file: {file_path}") from e
        except OSError as e:
            raise FileManagerError(f"Error reading file {file_path}: {str(e)}") from e

    def write_file(self, file_path: str, content: str) -> None:
        """
        Écrit du contenu dans un fichier.

        Args:
            file_path: Le chemin du fichier à écrire
            content: Le contenu à écrire

        Raises:
            FileManagerError: Si le fichier ne peut pas être écrit
        """
        try:
            path = Path(file_path)
            path.parent.mkdir(parents=True, exist_ok=True)
            with open(path, 'w', encoding='utf-8') as f:
                f.write(content)

        except PermissionError as e:
            raise FileManagerError(f"Permission denied for file: {file_path}") from e
        except OSError as e:
            raise FileManagerError(f"Error writing file {file_path}: {str(e)}") from e


# Instance globale du gestionnaire de fichiers
file_manager = FileManager()
