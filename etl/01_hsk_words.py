# etl/01_hsk_words.py
import pathlib
import sys

from game_data import save_hsk_words, save_json
from hsk_dictionary import (
    analyze_hsk_levels,
    extract_char_glosses_with_top_words,
    extract_hsk_words,
    extract_word_glosses,
    load_jsonl,
)
from pinyin_util import build_word_pinyin

ROOT = pathlib.Path(__file__).resolve().parents[1]
WORD_DICT = ROOT / "data" / "00_hsk" / "chinese_dictionary_word_2025-06-25.jsonl"
CHAR_DICT = ROOT / "data" / "00_hsk" / "chinese_dictionary_char_2025-06-25.jsonl"
OUT = ROOT / "data" / "processed" / "game_data"


def main():
    for path in (WORD_DICT, CHAR_DICT):
        if not path.exists():
            print(f"ERROR: {path} not found.")
            sys.exit(1)

    print("📚 Loading Chinese word dictionary...")
    words = load_jsonl(WORD_DICT)
    print(f"  ✅ Loaded {len(words)} Chinese entries total")

    print("📚 Loading Chinese character dictionary...")
    chars = load_jsonl(CHAR_DICT, warn=False)
    print(f"  ✅ Loaded {len(chars)} Chinese character entries")

    analyze_hsk_levels(words, chars)

    print("\n🎮 Extracting HSK words for game data...")
    hsk_words = extract_hsk_words(words)

    print("\n📖 Extracting word glosses...")
    word_glosses = extract_word_glosses(words)
    print(f"  ✅ Extracted {len(word_glosses)} word glosses")

    print("\n📖 Extracting character glosses with top words...")
    char_glosses = extract_char_glosses_with_top_words(chars)
    print(f"  ✅ Extracted {len(char_glosses)} character glosses")

    print("\n🔤 Generating pinyin for HSK words...")
    word_pinyin = build_word_pinyin(hsk_words)

    OUT.mkdir(parents=True, exist_ok=True)
    save_hsk_words(hsk_words, OUT / "hsk_words.json")
    save_json(word_glosses, OUT / "word_glosses.json")
    save_json(char_glosses, OUT / "char_glosses.json")
    save_json(word_pinyin, OUT / "word_pinyin.json")

    print("Done.")


if __name__ == "__main__":
    main()
