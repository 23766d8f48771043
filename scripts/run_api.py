"""
Serve the HTTP API with uvicorn

Usage:
    python scripts/run_api.py [PORT]
"""

import os
import sys
from pathlib import Path

import uvicorn

# Add src to path
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

from src.services.api.app import app


def main():
    port = int(sys.argv[1]) if len(sys.argv) > 1 else int(os.getenv("PORT", "8000"))
    host = os.getenv("HOST", "127.0.0.1")

    print("=" * 60)
    print(f"HTS CLASSIFICATION API on http://{host}:{port}/api")
    print("=" * 60)

    uvicorn.run(app, host=host, port=port)


if __name__ == "__main__":
    main()
