"""
Main entry point for the FastAPI application.
Run this file to start the FastAPI server.

Usage:
    python run_fastapi.py

Or with uvicorn directly:
    uvicorn src.fastapi_app:create_fastapi_app --factory --host 0.0.0.0 --port 5000 --reload
"""

import os

from dotenv import load_dotenv

# Load environment variables
load_dotenv()

import uvicorn

from src.config.settings import get_config

if __name__ == "__main__":
    env = os.getenv("APP_ENV", "development")
    config = get_config(env)

    print(f"Starting Forum API in {env} mode...")
    print(f"Server running on http://{config.HOST}:{config.PORT}")
    print(f"API docs available at http://{config.HOST}:{config.PORT}/docs")

    uvicorn.run(
        "src.fastapi_app:create_fastapi_app",
        factory=True,
        host=config.HOST,
        port=config.PORT,
        reload=config.DEBUG,
        log_level="info" if config.DEBUG else "warning",
    )
