import json

from game_data import GameData, build_game_data, load_hsk_words, save_game_data, save_hsk_words
from ids_components import component_key


IDS_MAP = {
    "明": "⿰日月",
    "好": "⿰女子",
    "湖": "⿰氵胡",
    "胡": "⿰古月",
    "古": "⿱十口",
}
HSK_WORDS = {1: ["明天", "好"], 3: ["湖"]}


def test_build_game_data():
    game_data = build_game_data(HSK_WORDS, IDS_MAP)
    assert isinstance(game_data, GameData)
    assert set(game_data.char_to_decomposition) == set(IDS_MAP)
    assert game_data.components_to_chars[component_key(["日", "月"])] == ["明"]
    assert "天" in game_data.allowed_components
    assert "胡" not in game_data.allowed_components
    assert game_data.hsk_words is HSK_WORDS


def test_build_prints_summary(capsys):
    build_game_data(HSK_WORDS, IDS_MAP)
    out = capsys.readouterr().out
    assert "Built 5 character decompositions" in out
    assert "unique leaf components" in out


def test_save_game_data(tmp_path):
    out_dir = tmp_path / "game_data"
    save_game_data(build_game_data(HSK_WORDS, IDS_MAP), out_dir)

    def read(name):
        return json.loads((out_dir / name).read_text(encoding="utf-8"))

    decomps = read("char_to_decomposition.json")
    assert decomps["明"] == {"character": "明", "ids": "⿰日月", "components": ["日", "月"]}

    index = read("components_to_chars.json")
    assert index[component_key(["日", "月"])] == ["明"]

    allowed = read("allowed_components.json")
    assert allowed == sorted(allowed)
    assert "子" in allowed

    assert read("hsk_words.json") == {"1": ["明天", "好"], "3": ["湖"]}


def test_saved_json_is_not_ascii_escaped(tmp_path):
    save_game_data(build_game_data(HSK_WORDS, IDS_MAP), tmp_path)
    text = (tmp_path / "hsk_words.json").read_text(encoding="utf-8")
    assert "明天" in text


def test_load_hsk_words_filters_levels(tmp_path):
    path = tmp_path / "hsk_words.json"
    path.write_text(
        json.dumps({"0": ["x"], "1": ["你好"], "9": ["龢"], "10": ["y"], "abc": ["z"]},
                   ensure_ascii=False),
        encoding="utf-8")
    assert load_hsk_words(path) == {1: ["你好"], 9: ["龢"]}


def test_hsk_words_round_trip(tmp_path):
    save_game_data(GameData(hsk_words=HSK_WORDS), tmp_path)
    assert load_hsk_words(tmp_path / "hsk_words.json") == HSK_WORDS


def test_save_hsk_words_sorts_levels_and_stringifies_keys(tmp_path):
    path = tmp_path / "hsk_words.json"
    save_hsk_words({3: ["湖"], 1: ["好"]}, path)
    text = path.read_text(encoding="utf-8")
    assert text == '{"1":["好"],"3":["湖"]}'
    assert load_hsk_words(path) == {1: ["好"], 3: ["湖"]}
