from __future__ import annotations

import logging
import os
import sys
from pathlib import Path

import uvicorn


def main(host: str | None = None, port: int | None = None):
    root = Path(__file__).resolve().parent.parent
    if str(root) not in sys.path:
        sys.path.insert(0, str(root))
    logging.basicConfig(
        level=os.getenv("CITEGUARD_LOG_LEVEL", "INFO").upper(),
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
    )
    uvicorn.run(
        "app.main:app",
        host=host or os.getenv("CITEGUARD_HOST", "127.0.0.1"),
        port=port or int(os.getenv("CITEGUARD_PORT", "8000")),
        reload=False,
    )


if __name__ == "__main__":
    main()
