# etl/game_data.py
import json
import pathlib
from dataclasses import dataclass, field

from allowed_components import extract_allowed_components
from reverse_index import build_char_decompositions, build_components_to_chars


@dataclass
class GameData:
    char_to_decomposition: dict = field(default_factory=dict)
    components_to_chars: dict = field(default_factory=dict)
    allowed_components: set = field(default_factory=set)
    hsk_words: dict = field(default_factory=dict)


def build_game_data(hsk_words, ids_map):
    print("🔧 Building character decompositions...")
    char_to_decomposition = build_char_decompositions(ids_map)
    print(f"  ✅ Built {len(char_to_decomposition)} character decompositions")

    print("🔧 Building components → characters mapping...")
    components_to_chars = build_components_to_chars(char_to_decomposition, ids_map)
    print(f"  ✅ Built {len(components_to_chars)} component combinations")

    print("🔧 Extracting allowed components from HSK words...")
    allowed_components = extract_allowed_components(hsk_words, ids_map)
    print(f"  ✅ Found {len(allowed_components)} unique leaf components")

    return GameData(
        char_to_decomposition=char_to_decomposition,
        components_to_chars=components_to_chars,
        allowed_components=allowed_components,
        hsk_words=hsk_words,
    )


def save_json(obj, path):
    path = pathlib.Path(path)
    with open(path, 'w', encoding='utf-8') as f:
        json.dump(obj, f, ensure_ascii=False, separators=(',', ':'))
    print(f"  ✅ Saved {path}")


def save_hsk_words(hsk_words, path):
    # JSON object keys are strings: {"1": [...], "2": [...]}
    save_json({str(level): words for level, words in sorted(hsk_words.items())}, path)


def save_game_data(game_data, out_dir):
    out_dir = pathlib.Path(out_dir)
    out_dir.mkdir(parents=True, exist_ok=True)

    save_json(
        {ch: d.to_dict() for ch, d in game_data.char_to_decomposition.items()},
        out_dir / "char_to_decomposition.json")
    save_json(game_data.components_to_chars, out_dir / "components_to_chars.json")
    save_json(sorted(game_data.allowed_components), out_dir / "allowed_components.json")
    save_hsk_words(game_data.hsk_words, out_dir / "hsk_words.json")


def load_hsk_words(path):
    with open(path, 'r', encoding='utf-8') as f:
        raw = json.load(f)

    hsk_words = {}
    for level, words in raw.items():
        try:
            level = int(level)
        except ValueError:
            continue
        if 1 <= level <= 9:
            hsk_words[level] = list(words)
    return hsk_words
