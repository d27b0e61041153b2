# formatters/prompt_formatter.py
from typing import Dict, List

SYSTEM_PROMPT = (
    "あなたは与えられた本文だけを根拠として日本語のクイズを作成するアシスタントです。"
    "出力は必ずJSONのみで、説明文や前後のテキストは一切含めないでください。"
)

QUIZ_EXAMPLE_LINE = '    { "question": "質問文", "answer": "模範解答（簡潔に）" }'

def format_target_shape(count: int = 5) -> List[str]:
    """JSON skeleton the model is asked to reproduce"""
    items = [QUIZ_EXAMPLE_LINE + ("," if i < count - 1 else "") for i in range(count)]
    return ["{", '  "quizzes": ['] + items + ["  ]", "}"]

def format_user_prompt(text: str, count: int = 5) -> str:
    """Build the user instruction embedding the sanitized text verbatim"""
    lines = [
        f"次の本文から、内容に基づいた日本語のクイズを{count}問作成してください。",
        '出力は次のJSONオブジェクト形式にしてください（配列は"quizzes"プロパティに入れる）:',
        "",
        *format_target_shape(count),
        "",
        "要件:",
        "- 絶対に有効なJSONオブジェクトのみを出力（前後の説明やコードブロック禁止）",
        "- 各question/answerは本文の情報に基づくこと",
        "- 質問は簡潔に、答えも簡潔に",
        "",
        "本文:",
        text,
    ]
    return "\n".join(lines)

def format_messages(text: str, count: int = 5) -> List[Dict[str, str]]:
    """System + user message pair for the chat-completions request"""
    return [
        {"role": "system", "content": SYSTEM_PROMPT},
        {"role": "user", "content": format_user_prompt(text, count)},
    ]
