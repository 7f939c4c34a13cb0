"""
Development server for the Users & Events API.

Reads .env, then serves ``app.main:app`` with uvicorn.  Tables are
created on startup unless disabled, so a fresh SQLite file works without
running the migrations first.

Usage:
    python scripts/run_dev.py [--host HOST] [--port PORT] [--no-reload] [--no-create-tables]
"""

import argparse
import os
import sys
from pathlib import Path

# Add project root to path
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

from dotenv import load_dotenv

load_dotenv()

import uvicorn


def parse_args() -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Run the Users & Events API with auto-reload.")
    parser.add_argument("--host", default="127.0.0.1")
    parser.add_argument("--port", type=int, default=8000)
    parser.add_argument("--no-reload", action="store_true", help="Disable code reloading")
    parser.add_argument("--no-create-tables", action="store_true",
                        help="Leave the schema to 'alembic upgrade head'")
    return parser.parse_args()


if __name__ == "__main__":
    args = parse_args()

    # Read by app.core.config in the server process
    if not args.no_create_tables:
        os.environ.setdefault("CREATE_TABLES_ON_STARTUP", "true")

    base_url = f"http://{args.host}:{args.port}"
    print(f"Users & Events API on {base_url} (docs at {base_url}/docs, Ctrl+C to stop)")
    print(f"Database: {os.environ.get('DATABASE_URL', 'sqlite:///./app.db')}")

    uvicorn.run("app.main:app", host=args.host, port=args.port, reload=not args.no_reload, log_level="info")
