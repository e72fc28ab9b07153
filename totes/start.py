#!/usr/bin/env python3
"""
Totes - Start the back-office API
Run: python start.py [--port 8000] [--reload]
"""

import argparse
import os
import sys
from pathlib import Path

import uvicorn


# Colors for terminal output
class Colors:
    GREEN = '\033[92m'
    YELLOW = '\033[93m'
    RED = '\033[91m'
    CYAN = '\033[96m'
    WHITE = '\033[97m'
    RESET = '\033[0m'


def print_colored(message, color=Colors.WHITE):
    """Print colored message"""
    print(f"{color}{message}{Colors.RESET}")


def check_requirements(project_root):
    """The API needs a database URL, either in the environment or in a .env file"""
    env_files = [project_root / ".env", project_root / "backend" / ".env"]
    if any(p.is_file() for p in env_files) or os.getenv("DATABASE_URL") or os.getenv("DB_PASSWORD"):
        return True
    print_colored("❌ No .env file and no DATABASE_URL set!", Colors.RED)
    print_colored("Create totes/.env (see DATABASE_URL, SECRET_KEY, ADMIN_PASSWORD)", Colors.YELLOW)
    return False


def main():
    parser = argparse.ArgumentParser(description="Start the Totes API")
    parser.add_argument("--host", default="0.0.0.0")
    parser.add_argument("--port", type=int, default=int(os.getenv("PORT", "8000")))
    parser.add_argument("--reload", action="store_true", help="Restart on code changes")
    args = parser.parse_args()

    project_root = Path(__file__).resolve().parent
    if not check_requirements(project_root):
        sys.exit(1)

    backend_dir = project_root / "backend"
    sys.path.insert(0, str(backend_dir))

    print_colored("🚀 Starting Totes API", Colors.GREEN)
    print_colored("=" * 50, Colors.GREEN)
    print_colored(f"   Backend API:    http://localhost:{args.port}", Colors.WHITE)
    print_colored(f"   Health Check:   http://localhost:{args.port}/health", Colors.WHITE)
    print_colored("💡 Press Ctrl+C to stop", Colors.YELLOW)
    print()

    uvicorn.run(
        "app.main:app",
        host=args.host,
        port=args.port,
        reload=args.reload,
        app_dir=str(backend_dir),
    )


if __name__ == "__main__":
    main()
