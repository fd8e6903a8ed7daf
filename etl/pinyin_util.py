import sys
import json
from pypinyin import pinyin, Style

def generate_pinyin(text):
    # Tone marks (e.g., zhōng); heteronyms take the first reading,
    # which is pypinyin's default without heteronym=True
    result = pinyin(text, style=Style.TONE)
    # [['zhōng'], ['xīn']] -> "zhōng xīn"
    return ' '.join(item[0] if item else '' for item in result)

def build_word_pinyin(hsk_words):
    word_pinyin = {}
    for words in hsk_words.values():
        for word in words:
            if word not in word_pinyin:
                word_pinyin[word] = generate_pinyin(word)
    return word_pinyin

if __name__ == "__main__":
    if len(sys.argv) > 1:
        text = " ".join(sys.argv[1:])
        try:
            print(json.dumps({"pinyin": generate_pinyin(text)}, ensure_ascii=False))
        except Exception as e:
            print(json.dumps({"error": str(e)}))
    else:
        print(json.dumps({"error": "No text provided"}))
