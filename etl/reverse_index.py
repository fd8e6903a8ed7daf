# etl/reverse_index.py
from collections import defaultdict
from dataclasses import dataclass
from typing import Tuple

from ids_components import component_key, extract_components
from leaf_decomposer import leaves_of


@dataclass(frozen=True)
class CharacterDecomposition:
    character: str
    ids: str
    components: Tuple[str, ...]

    def to_dict(self):
        return {
            "character": self.character,
            "ids": self.ids,
            "components": list(self.components),
        }


def build_char_decompositions(ids_map):
    decompositions = {}
    for character, ids in ids_map.items():
        decompositions[character] = CharacterDecomposition(
            character=character,
            ids=ids,
            components=tuple(extract_components(ids)),
        )
    return decompositions


def build_components_to_chars(decompositions, ids_map):
    """
    Builds the reverse mapping { sorted components: [characters...] }

    Every character goes in under its direct components (明 -> "日月") and,
    when they differ, under its leaf components as well, so a character can be
    built either from its immediate parts or from atomic ones.
    Lists keep insertion order and are not de-duplicated.
    """
    components_map = defaultdict(list)

    for character, decomp in decompositions.items():
        direct_key = component_key(decomp.components)
        components_map[direct_key].append(character)

        leaves = leaves_of(character, ids_map)
        if leaves:
            leaf_key = component_key(leaves)
            if leaf_key != direct_key:
                components_map[leaf_key].append(character)

    return dict(components_map)
