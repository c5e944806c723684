"""
Development server launcher.

Loads the .env file and serves the training records API with uvicorn
in reload mode.  Host and port come from ``DEV_HOST``/``DEV_PORT``.

Usage:
    python scripts/run_dev.py
"""

import os
import sys
from pathlib import Path

project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

from dotenv import load_dotenv

load_dotenv()

import uvicorn

from app.core.config import settings

if __name__ == "__main__":
    host = os.getenv("DEV_HOST", "127.0.0.1")
    port = int(os.getenv("DEV_PORT", "8000"))
    generator_state = "configured" if settings.GEMINI_API_KEY else "NOT configured (recommendations will fail)"

    print("=" * 60)
    print("Training Records Development Server")
    print("=" * 60)
    print(f"API:       http://{host}:{port}/api/v1")
    print(f"Docs:      http://{host}:{port}/docs")
    print(f"Database:  {settings.database_url.split('@')[-1]}")
    print(f"Generator: {settings.GENERATOR_MODEL}, {generator_state}")
    print("=" * 60)

    uvicorn.run("app.main:app", host=host, port=port, reload=True, log_level=settings.LOG_LEVEL.lower())
