import json
from quiz_generator_modular.formatters.prompt_formatter import SYSTEM_PROMPT, format_messages, format_target_shape
from quiz_generator_modular.formatters.quiz_formatter import format_char_counter, format_quiz_list
from quiz_generator_modular.parsers.text_input import sanitize_text, truncate_text

def test_truncate_keeps_first_thousand_characters():
    text = "x" * 1500
    assert truncate_text(text) == "x" * 1000
    assert truncate_text(truncate_text(text)) == truncate_text(text)

def test_truncate_leaves_short_text_alone():
    assert truncate_text("short") == "short"

def test_sanitize_trims_before_truncating():
    assert sanitize_text("   " + "y" * 1200) == "y" * 1000
    assert sanitize_text(" \n ") == ""

def test_target_shape_is_valid_json_with_five_items():
    shape = json.loads("\n".join(format_target_shape(5)))
    assert len(shape["quizzes"]) == 5
    assert set(shape["quizzes"][0]) == {"question", "answer"}

def test_messages_embed_text_verbatim():
    messages = format_messages("吾輩は猫である。")

    assert messages[0] == {"role": "system", "content": SYSTEM_PROMPT}
    assert messages[1]["role"] == "user"
    assert "クイズを5問作成" in messages[1]["content"]
    assert messages[1]["content"].endswith("本文:\n吾輩は猫である。")

def test_quiz_list_rendering():
    rendered = format_quiz_list([{"question": "首都は?", "answer": "東京"}, {"question": "山は?", "answer": "富士山"}])

    assert rendered.startswith("生成結果（5問まで）")
    assert "Q1. 首都は?" in rendered
    assert "[答え] 東京" in rendered
    assert "Q2. 山は?" in rendered
    assert format_quiz_list([]) == ""

def test_char_counter():
    assert format_char_counter("abc", 1000) == "文字数: 3 / 1000"
