"""
Start the site API with uvicorn.
Usage: python3 run.py   (from the project root; HOST/PORT come from the environment)
"""
import uvicorn

from config import settings

if __name__ == "__main__":
    uvicorn.run(
        "main:app",
        host=settings.host,
        port=settings.port,
        reload=settings.debug,
        log_config=None,
    )
