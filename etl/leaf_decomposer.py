# etl/leaf_decomposer.py
from ids_components import extract_components


def decompose_to_leaves(character, ids_map, visited):
    """
    Recursively decomposes a character down to components with no IDS entry.

    `visited` is shared by the whole call tree of one request: a character
    already seen (through any branch) returns an empty set, which stops cycles
    like A -> B -> A. Start every independent request with a fresh set.
    """
    leaves = set()

    if character in visited:
        return leaves
    visited.add(character)

    ids = ids_map.get(character)
    if ids is None:
        # No decomposition available, this is a leaf
        leaves.add(character)
        return leaves

    for component in extract_components(ids):
        sub_leaves = decompose_to_leaves(component, ids_map, visited)
        if sub_leaves:
            leaves.update(sub_leaves)
        else:
            leaves.add(component)

    return leaves


def leaves_of(character, ids_map):
    return decompose_to_leaves(character, ids_map, set())
