# etl/ids_parser.py
import pathlib

ROOT = pathlib.Path(__file__).resolve().parents[1]
IDS_DIR = ROOT / "data" / "20_decomposition" / "ids"

# Trust order: later files overwrite earlier ones.
# IDS-JIS-X0208-1990.txt is left out, it contains non-standard references like &I-J90-3065;
IDS_FILES = [
    IDS_DIR / "IDS-UCS-Basic.txt",
    IDS_DIR / "IDS-UCS-Ext-A.txt",
    IDS_DIR / "IDS-CDP.txt",  # CDP entity references
]


def parse_ids_lines(lines):
    """
    Parses CHISE IDS lines and returns a dict: { character: ids }
    Line format: U+XXXX<tab>CHAR<tab>IDS  or  CDP-XXXX<tab>&CDP-XXXX;<tab>IDS
    """
    ids_map = {}
    for line in lines:
        line = line.rstrip("\r\n")
        if not line.strip() or line.startswith("#") or line.startswith(";;"):
            continue
        parts = line.split("\t")
        if len(parts) < 3:
            continue
        character, ids = parts[1], parts[2]
        # Self-referential entries mean "no decomposition"
        if ids != character:
            ids_map[character] = ids
    return ids_map


def parse_ids_file(path):
    with open(path, "r", encoding="utf-8") as f:
        return parse_ids_lines(f)


def load_all_ids(paths=None):
    combined = {}
    for path in (IDS_FILES if paths is None else paths):
        try:
            ids_map = parse_ids_file(path)
        except (OSError, UnicodeDecodeError) as e:
            print(f"  ⚠️  Warning: Could not load {path}: {e}")
            continue
        print(f"  ✅ Loaded {len(ids_map)} from {path}")
        combined.update(ids_map)

    print(f"  📊 Total unique IDS entries: {len(combined)}")
    return combined
