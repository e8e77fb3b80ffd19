"""
Utility functions for the record generator.
"""

import re
from pathlib import Path

# Kebab-case and snake_case separators
_SEPARATOR_PATTERN = re.compile(r"[-_]")


def _upper_first(word: str) -> str:
    """Upper-case the first letter, leaving the rest untouched."""
    return word[:1].upper() + word[1:]


def pascal_case_file_stem(path: str | Path) -> str:
    """Convert a file name's stem to PascalCase.

    Examples:
        "results.json" -> "Results"
        "user-profile.json" -> "UserProfile"
        "api_types.json" -> "ApiTypes"
        "userModels.json" -> "UserModels"

    Args:
        path: Path of the input file

    Returns:
        PascalCase stem
    """
    stem = Path(path).stem
    return "".join(_upper_first(part) for part in _SEPARATOR_PATTERN.split(stem))


def output_file_path(output_dir: str | Path, input_path: str | Path, language: str, extension: str) -> Path:
    """Path of the generated file for one language: <output>/<language>/<Stem>.<extension>"""
    return Path(output_dir) / language / f"{pascal_case_file_stem(input_path)}.{extension}"
