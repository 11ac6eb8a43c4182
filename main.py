"""
HTC Chamber Plan API Entry Point

Use this file for deployment:
  uvicorn main:app --host 0.0.0.0 --port $PORT
"""

from api_server import app  # noqa: F401
from app.config import load_settings


# For local development
if __name__ == "__main__":
    import uvicorn
    uvicorn.run("main:app", host="0.0.0.0", port=load_settings().port, reload=True)
