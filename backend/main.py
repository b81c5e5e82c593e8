"""
Main entry point for the CodeShelf snippet sharing backend.
Runs the FastAPI server with uvicorn.
"""

import uvicorn

from codeshelf.shared.config import settings


def main():
    """Start the API server."""
    print("=" * 60)
    print("  CodeShelf - Snippet Sharing Backend")
    print("=" * 60)
    print(f"  Environment: {settings.app_env}")
    print(f"  Host: {settings.api_host}:{settings.api_port}")
    print(f"  Debug: {settings.api_debug}")
    print(f"  Storage: {settings.storage_backend}")
    print(f"  Demo data: {settings.seed_demo_data}")
    print("=" * 60)

    uvicorn.run(
        "codeshelf.presentation.api.app:app",
        host=settings.api_host,
        port=settings.api_port,
        reload=settings.api_debug,
        log_level=settings.log_level.lower(),
    )


if __name__ == "__main__":
    main()
