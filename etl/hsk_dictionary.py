# etl/hsk_dictionary.py
# Word / character dictionary (JSON lines) -> HSK words and glosses
import json
from collections import Counter

NO_HSK_LEVEL = 10
TOP_WORDS_PER_CHAR = 3


def load_jsonl(path, warn=True):
    entries = []
    with open(path, 'r', encoding='utf-8') as f:
        for line_num, line in enumerate(f, start=1):
            if not line.strip():
                continue
            try:
                entry = json.loads(line)
            except json.JSONDecodeError as e:
                if warn:
                    print(f"Warning: Failed to parse entry on line {line_num}: {e}")
                continue
            if not isinstance(entry, dict):
                continue
            entries.append(entry)
    return entries


def _hsk_level(entry):
    stats = entry.get('statistics')
    if not stats:
        return None
    return stats.get('hskLevel')


def count_hsk_levels(entries):
    """
    Returns (Counter {level: count}, entries with statistics, entries without).
    Level 10 means "no HSK level".
    """
    counts = Counter()
    with_stats = 0
    without_stats = 0
    for entry in entries:
        if entry.get('statistics') is None:
            without_stats += 1
            continue
        with_stats += 1
        level = _hsk_level(entry)
        if type(level) is int and 0 <= level <= NO_HSK_LEVEL:
            counts[level] += 1
    return counts, with_stats, without_stats


def _print_distribution(label, entries):
    counts, with_stats, without_stats = count_hsk_levels(entries)
    print(f"Total {label}: {len(entries)}")
    print(f"{label.capitalize()} with statistics: {with_stats}")
    print(f"{label.capitalize()} without statistics: {without_stats}")
    print()
    print("HSK Level Distribution:")
    for level in range(1, 10):
        if counts[level]:
            pct = counts[level] / with_stats * 100
            print(f"  HSK {level}: {counts[level]:>6} {label} ({pct:>5.2f}%)")
    if counts[NO_HSK_LEVEL]:
        pct = counts[NO_HSK_LEVEL] / with_stats * 100
        print(f"  No HSK (level 10): {counts[NO_HSK_LEVEL]:>6} {label} ({pct:>5.2f}%)")


def analyze_hsk_levels(words, chars):
    print("\n📊 HSK Level Analysis\n")
    print("=" * 60)

    print("\n🔤 WORD DICTIONARY ANALYSIS:")
    print("-" * 60)
    _print_distribution("words", words)

    print("\n📝 CHARACTER DICTIONARY ANALYSIS:")
    print("-" * 60)
    _print_distribution("characters", chars)

    print("\n" + "=" * 60)


def extract_hsk_words(words):
    hsk_words = {}
    for word in words:
        level = _hsk_level(word)
        # 10 means "no HSK", 0 is unused
        if type(level) is not int or not 1 <= level <= 9:
            continue
        trad = word.get('trad')
        if not trad:
            continue
        hsk_words.setdefault(level, []).append(trad)

    for level in sorted(hsk_words):
        print(f"  HSK {level}: {len(hsk_words[level])} words")
    return hsk_words


def extract_word_glosses(words):
    glosses = {}
    for word in words:
        definitions = []
        for item in word.get('items') or []:
            definitions.extend(item.get('definitions') or [])
        if definitions and word.get('trad'):
            glosses[word['trad']] = definitions
    return glosses


def _blank_out(top_word, ch, variant_of=None):
    # Replace the character with "_" in the word: simplified first, then
    # traditional, then the same for the character it is a variant of.
    word = top_word.get('word') or ''
    trad = top_word.get('trad') or word

    candidates = [word.replace(ch, '_')]
    if trad != word:
        candidates.append(trad.replace(ch, '_'))
    if variant_of:
        candidates.append(word.replace(variant_of, '_'))
        if trad != word:
            candidates.append(trad.replace(variant_of, '_'))

    for candidate in candidates:
        if '_' in candidate:
            return candidate
    return '_'


def extract_char_glosses_with_top_words(chars):
    glosses = {}
    for entry in chars:
        ch = entry.get('char')
        if not ch:
            continue

        definitions = []
        if entry.get('gloss'):
            definitions.append(entry['gloss'])

        stats = entry.get('statistics') or {}
        for top_word in (stats.get('topWords') or [])[:TOP_WORDS_PER_CHAR]:
            blanked = _blank_out(top_word, ch, entry.get('variantOf'))
            definitions.append(f"{blanked} ({top_word.get('gloss') or ''})")

        if definitions:
            glosses[ch] = definitions
    return glosses
