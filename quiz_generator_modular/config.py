# config.py
import logging
import os
from typing import Dict, Any, List, Optional
from dotenv import load_dotenv

logger = logging.getLogger(__name__)

# Accepted credential variables, first non-empty one wins
API_KEY_ENV_VARS = ("NEXT_PUBLIC_OPENAI_API_KEY", "OPENAI_API_KEY")

class Config:
    """Configuration class to hold all application settings"""
    def __init__(self):
        self.openai_api_url: str = "https://api.openai.com/v1/chat/completions"
        self.model_name: str = "gpt-4o-mini"
        self.temperature: float = 0.7
        self.max_text_length: int = 1000
        self.max_quizzes: int = 5
        self.quiz_api_url: str = "http://127.0.0.1:8000/api/quiz"
        self.server_host: str = "0.0.0.0"
        self.server_port: int = 8000
        self.cors_origins: List[str] = [
            "http://localhost:3000",
            "http://localhost:5173",
            "http://127.0.0.1:8000",
        ]

# Global config instance
config = Config()

def configure_logging(level: Optional[str] = None) -> None:
    """Configure root logging from QUIZ_LOG_LEVEL (default INFO)"""
    level_name = (level or os.getenv("QUIZ_LOG_LEVEL") or "INFO").upper()
    logging.basicConfig(
        level=getattr(logging, level_name, logging.INFO),
        format="%(asctime)s %(levelname)s [%(name)s] %(message)s",
    )

def load_environment_config() -> None:
    """Load environment variables from .env file"""
    try:
        load_dotenv()
        logger.info("✅ Environment configuration loaded successfully")
    except Exception as e:
        logger.warning(f"⚠️ Could not load environment configuration: {e}")

def get_server_config() -> Dict[str, Any]:
    """Get client/server addresses from environment variables"""
    config.quiz_api_url = os.getenv("QUIZ_API_URL", config.quiz_api_url)
    config.server_host = os.getenv("QUIZ_SERVER_HOST", config.server_host)

    port = os.getenv("QUIZ_SERVER_PORT")
    if port:
        try:
            config.server_port = int(port)
        except ValueError:
            logger.warning(f"⚠️ Ignoring invalid QUIZ_SERVER_PORT={port!r}")

    return {
        "quiz_api_url": config.quiz_api_url,
        "server_host": config.server_host,
        "server_port": config.server_port,
    }

def get_api_key() -> Optional[str]:
    """Return the OpenAI credential, read at call time so a missing key is a request error"""
    for name in API_KEY_ENV_VARS:
        value = os.getenv(name)
        if value:
            return value
    return None

def get_model_config() -> Dict[str, Any]:
    """Get model configuration"""
    return {
        "model_name": config.model_name,
        "temperature": config.temperature,
        "api_url": config.openai_api_url,
    }

def initialize_all() -> Dict[str, bool]:
    """Initialize all components and return status"""
    status = {}

    # Load environment
    load_environment_config()

    server_config = get_server_config()
    status["server_config"] = bool(server_config["quiz_api_url"])

    # Key absence is reported, not fatal
    status["openai_api_key"] = get_api_key() is not None

    return status
