"""
Card-art loading.

A card-art directory holds one text file per rank, named as in CARD_FILES.
Every file is `height` lines of exactly `width` characters, each line ending
in a newline, and all 13 files share the same width and height.
"""

from __future__ import annotations

import logging
from pathlib import Path

from .engine.cards import CardFace

logger = logging.getLogger(__name__)

# Same order as RANK_NAMES / RANK_POINTS in engine.cards.
CARD_FILES: tuple[str, ...] = (
    'ace.txt', 'king.txt', 'queen.txt', 'jack.txt', '10.txt',
    '9.txt', '8.txt', '7.txt', '6.txt', '5.txt', '4.txt', '3.txt', '2.txt',
)

DEFAULT_CARD_DIR: Path = Path(__file__).parent / 'data' / 'cards'


class AssetError(ValueError):
    """Raised for a missing, unreadable or malformed card-art file."""


def load_face(path: str | Path) -> CardFace:
    """Read one card-art file into a CardFace.

    Raises:
        AssetError: If the file cannot be read, is empty, or its lines are not
            all the same length.
    """
    path = Path(path)
    try:
        text = path.read_text(encoding='utf-8')
    except (OSError, UnicodeDecodeError) as exc:
        raise AssetError(f"Cannot read card art {path}: {exc}") from exc

    try:
        return CardFace.from_text(text)
    except ValueError as exc:
        raise AssetError(f"Malformed card art {path}: {exc}") from exc


def load_card_faces(directory: str | Path) -> tuple[CardFace, ...]:
    """Load the 13 rank faces from `directory`, ace first and 2 last.

    Raises:
        AssetError: If any file fails load_face() or its dimensions differ
            from those of the first face.
    """
    directory = Path(directory)
    faces: list[CardFace] = []
    for name in CARD_FILES:
        face = load_face(directory / name)
        if faces and (face.width, face.height) != (faces[0].width, faces[0].height):
            raise AssetError(
                f"{name} is {face.width}x{face.height}, expected "
                f"{faces[0].width}x{faces[0].height} like {CARD_FILES[0]}."
            )
        faces.append(face)

    logger.info(
        "Loaded %d card faces (%dx%d) from %s",
        len(faces), faces[0].width, faces[0].height, directory,
    )
    return tuple(faces)
