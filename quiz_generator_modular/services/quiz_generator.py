# services/quiz_generator.py
import logging
from typing import Any, Dict, List, Optional
import httpx
from quiz_generator_modular.config import config, get_api_key, API_KEY_ENV_VARS
from quiz_generator_modular.formatters.prompt_formatter import format_messages
from quiz_generator_modular.models.normalization_report import NormalizationReport
from quiz_generator_modular.parsers.model_output_parser import extract_content, parse_model_output, normalize_quizzes
from quiz_generator_modular.parsers.text_input import sanitize_text
from quiz_generator_modular.services.errors import ProviderError, QuizGenerationError
from quiz_generator_modular.services.openai_client import OpenAIChatClient

logger = logging.getLogger(__name__)

MISSING_KEY_MESSAGE = "Missing OpenAI API key in environment (set {})".format(" or ".join(API_KEY_ENV_VARS))

def validate_text(body: Any) -> str:
    """Return the trimmed, truncated text or raise a 400"""
    text = body.get("text") if isinstance(body, dict) else None
    if not text or not isinstance(text, str):
        raise QuizGenerationError(400, "text is required")

    sanitized = sanitize_text(text)
    if not sanitized:
        raise QuizGenerationError(400, "text must not be empty")
    return sanitized

def require_api_key() -> str:
    api_key = get_api_key()
    if not api_key:
        raise QuizGenerationError(500, MISSING_KEY_MESSAGE)
    return api_key

def select_quizzes(content: str, report: Optional[NormalizationReport] = None) -> List[Dict[str, str]]:
    """Parse model content into at most max_quizzes items, or raise a 500"""
    report = report or NormalizationReport()

    result = parse_model_output(content)
    if not result.ok:
        logger.warning(f"⚠️ Could not parse model output ({len(content)} characters)")
        raise QuizGenerationError(500, "Failed to parse model output", raw=content)
    report.set_parse_stage(result.stage)

    quizzes = normalize_quizzes(result.value, report)
    if not quizzes:
        logger.warning(f"⚠️ No valid quizzes in model output{report.generate_report()}")
        raise QuizGenerationError(500, "No quizzes generated", raw=content)

    quizzes = quizzes[:config.max_quizzes]
    report.set_returned_count(len(quizzes))
    return quizzes

async def generate_quizzes(body: Any, transport: Optional[httpx.AsyncBaseTransport] = None) -> List[Dict[str, str]]:
    """Validate the request body, ask the model for quizzes and normalize its answer"""
    text = validate_text(body)
    api_key = require_api_key()
    logger.info(f"Generating quizzes for {len(text)} characters of text")

    client = OpenAIChatClient(api_key, transport=transport)
    try:
        data = await client.create_chat_completion(format_messages(text, config.max_quizzes))
    except ProviderError as e:
        logger.error(f"❌ {e} (status {e.status_code})")
        raise QuizGenerationError(500, "OpenAI API error", details=e.response)

    report = NormalizationReport()
    quizzes = select_quizzes(extract_content(data), report)

    logger.info(f"Parsed via {report.parse_stage}: kept {report.kept_count}/{report.candidate_count}, dropped {report.dropped_count}, returning {len(quizzes)}")
    if report.dropped_count:
        logger.debug(report.generate_report())
    return quizzes
