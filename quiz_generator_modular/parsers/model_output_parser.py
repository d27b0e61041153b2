# parsers/model_output_parser.py
import json
import logging
import re
from dataclasses import dataclass
from typing import Any, Dict, List, Optional
from quiz_generator_modular.models.normalization_report import NormalizationReport

logger = logging.getLogger(__name__)

STAGE_STRICT = "strict"
STAGE_ARRAY_FALLBACK = "array_fallback"

# Greedy: first "[" through last "]"
ARRAY_LITERAL_PATTERN = re.compile(r"\[.*\]", re.DOTALL)

@dataclass
class ParseResult:
    """Tagged outcome of parsing model output"""
    ok: bool
    raw: str
    value: Any = None
    stage: Optional[str] = None

def _first(items: Any) -> Any:
    if isinstance(items, list) and items:
        return items[0]
    return None

def _get(mapping: Any, key: str) -> Any:
    if isinstance(mapping, dict):
        return mapping.get(key)
    return None

def extract_content(data: Any) -> str:
    """Pull the completion text from a chat-completions payload.

    Reads ``choices[0].message.content`` and falls back to the first tool
    call's ``function.arguments``; returns an empty string when neither is
    present.
    """
    message = _get(_first(_get(data, "choices")), "message")

    content = _get(message, "content")
    if content is None:
        tool_call = _first(_get(message, "tool_calls"))
        content = _get(_get(tool_call, "function"), "arguments")

    if content is None:
        return ""
    return content if isinstance(content, str) else json.dumps(content, ensure_ascii=False)

def _try_json(text: str) -> ParseResult:
    try:
        return ParseResult(ok=True, raw=text, value=json.loads(text))
    except (json.JSONDecodeError, TypeError):
        return ParseResult(ok=False, raw=text)

def parse_model_output(content: str) -> ParseResult:
    """Strict JSON parse, then retry on the embedded array literal"""
    result = _try_json(content)
    if result.ok:
        result.stage = STAGE_STRICT
        return result

    match = ARRAY_LITERAL_PATTERN.search(content)
    if match:
        fallback = _try_json(match.group(0))
        if fallback.ok:
            logger.info("Model output was not pure JSON, recovered embedded array")
            return ParseResult(ok=True, raw=content, value=fallback.value, stage=STAGE_ARRAY_FALLBACK)

    return ParseResult(ok=False, raw=content)

def _candidates(parsed: Any) -> List[Any]:
    if isinstance(parsed, list):
        return parsed
    if isinstance(parsed, dict) and isinstance(parsed.get("quizzes"), list):
        return parsed["quizzes"]
    return []

def normalize_quizzes(parsed: Any, report: Optional[NormalizationReport] = None) -> List[Dict[str, str]]:
    """Keep candidates that are objects with string question and answer"""
    report = report or NormalizationReport()
    candidates = _candidates(parsed)
    report.set_candidate_count(len(candidates))

    if not candidates:
        report.add_warning(f"No quiz candidates found in parsed {type(parsed).__name__}")

    quizzes = []
    for index, item in enumerate(candidates):
        if not isinstance(item, dict):
            report.add_dropped(index, f"not an object ({type(item).__name__})")
            continue
        if "question" not in item or "answer" not in item:
            report.add_dropped(index, "missing question or answer")
            continue

        question, answer = item["question"], item["answer"]
        if not isinstance(question, str) or not isinstance(answer, str):
            report.add_dropped(index, "question and answer must be strings")
            continue

        quizzes.append({"question": question, "answer": answer})

    report.set_kept_count(len(quizzes))
    return quizzes
