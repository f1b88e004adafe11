#!/usr/bin/env python3
"""Launch the main API server."""
import sys
from pathlib import Path

# Add src to path
BACKEND_ROOT = Path(__file__).resolve().parent
sys.path.insert(0, str(BACKEND_ROOT / "src"))

if __name__ == "__main__":
    import uvicorn

    from foodcart.core.config import get_settings

    settings = get_settings()

    print("=" * 60)
    print(f"Starting Foodcart API on http://localhost:{settings.port}")
    print("Press Ctrl+C to stop")
    print("=" * 60)
    print()

    uvicorn.run(
        "foodcart.main:app",
        app_dir="src",
        host=settings.host,
        port=settings.port,
        reload=True
    )
