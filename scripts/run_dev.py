"""
Development server launcher.

Loads .env, points the app at a local SQLite file unless a database is
configured, creates the tables, and runs uvicorn in reload mode.

Usage:
    python scripts/run_dev.py [--port 8000]
"""

import argparse
import os
import sys
from pathlib import Path

# Add project root to path
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

# Load .env file
from dotenv import load_dotenv

load_dotenv()
os.environ.setdefault("SQLALCHEMY_DATABASE_URI", f"sqlite:///{project_root / 'igc_fitness.db'}")
os.environ.setdefault("DATABASE_PASSWORD", "")
os.environ.setdefault("SECRET_KEY", "dev-secret-key")

import uvicorn

from app.core.logging import setup_logging
from app.db.init_db import init_db

if __name__ == "__main__":
    parser = argparse.ArgumentParser(description="IGC Fitness development server")
    parser.add_argument("--host", default="127.0.0.1")
    parser.add_argument("--port", type=int, default=8000)
    args = parser.parse_args()

    setup_logging()
    init_db()

    print("=" * 60)
    print("IGC Fitness Development Server")
    print("=" * 60)
    print(f"API:  http://{args.host}:{args.port}")
    print(f"Docs: http://{args.host}:{args.port}/docs")
    print("Reset codes are logged unless RESEND_API_KEY is set.")
    print("=" * 60)

    uvicorn.run("app.main:app", host=args.host, port=args.port, reload=True, log_level="info")
