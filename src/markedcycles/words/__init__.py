from .necklace import (
    Word,
    rotate,
    rotations,
    canonical_form,
    is_canonical,
    minimal_period,
    primitive_root,
    is_cyclic_factor,
)
from .encoding import word_to_id, id_to_word, format_id

__all__ = [
    "Word",
    "rotate",
    "rotations",
    "canonical_form",
    "is_canonical",
    "minimal_period",
    "primitive_root",
    "is_cyclic_factor",
    "word_to_id",
    "id_to_word",
    "format_id",
]
