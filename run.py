"""
Run the API server (host/port from settings, reload when DEBUG is on).
Usage: python3 run.py   (from project root)
"""
import uvicorn

from config import settings

if __name__ == "__main__":
    uvicorn.run(
        "main:app",
        host=settings.host,
        port=settings.port,
        reload=settings.debug,
        log_level=settings.log_level.lower(),
    )
