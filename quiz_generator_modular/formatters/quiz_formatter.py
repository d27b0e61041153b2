# formatters/quiz_formatter.py
from typing import Dict, List

ANSWER_LABEL = "答え"
RESULTS_HEADING = "生成結果（5問まで）"

def format_quiz(index: int, quiz: Dict[str, str]) -> str:
    """Format one question/answer pair, numbered from 1"""
    return f"Q{index}. {quiz.get('question', '')}\n   [{ANSWER_LABEL}] {quiz.get('answer', '')}"

def format_quiz_list(quizzes: List[Dict[str, str]]) -> str:
    """Render generated quizzes for the terminal; empty string when there are none"""
    if not quizzes:
        return ""

    content = RESULTS_HEADING + "\n" + "=" * 50 + "\n"
    content += "\n\n".join(format_quiz(i, quiz) for i, quiz in enumerate(quizzes, 1))
    return content + "\n"

def format_char_counter(text: str, max_length: int) -> str:
    return f"文字数: {len(text)} / {max_length}"
