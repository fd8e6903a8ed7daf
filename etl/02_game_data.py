# etl/02_game_data.py
# Run after 01_hsk_words.py, which writes hsk_words.json
import pathlib
import sys

from game_data import build_game_data, load_hsk_words, save_game_data
from ids_parser import IDS_FILES, load_all_ids

ROOT = pathlib.Path(__file__).resolve().parents[1]
OUT = ROOT / "data" / "processed" / "game_data"
HSK_WORDS = OUT / "hsk_words.json"


def main():
    if not HSK_WORDS.exists():
        print(f"ERROR: {HSK_WORDS} not found. Run 01_hsk_words.py first.")
        sys.exit(1)
    hsk_words = load_hsk_words(HSK_WORDS)

    print("📖 Loading IDS (character decomposition) data...")
    ids_map = load_all_ids(IDS_FILES)
    if not ids_map:
        print("ERROR: no IDS entries could be loaded")
        sys.exit(1)

    print("\n🎮 Building game data structures...")
    game_data = build_game_data(hsk_words, ids_map)

    print("\n💾 Saving game data...")
    save_game_data(game_data, OUT)

    print(f"\n✅ All done! Game data saved to {OUT}")


if __name__ == "__main__":
    main()
