# server.py - FastAPI server entry point
import uvicorn
from quiz_generator_modular.config import config, get_server_config

def run():
    get_server_config()
    uvicorn.run(
        "quiz_generator_modular.api.fastapi_app:app",
        host=config.server_host,
        port=config.server_port,
        reload=True,
        log_level="info"
    )

if __name__ == "__main__":
    run()
