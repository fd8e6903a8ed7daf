# etl/allowed_components.py
from leaf_decomposer import leaves_of


def extract_allowed_components(hsk_words, ids_map):
    # Union of the leaf components of every character of every HSK word
    allowed = set()
    for words in hsk_words.values():
        for word in words:
            for ch in word:
                allowed.update(leaves_of(ch, ids_map))
    return allowed
