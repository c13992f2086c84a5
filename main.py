#!/usr/bin/env python3
"""
slidesummarizer

A FastAPI application that summarizes long text and spreads the summary
across a sequence of social-ready slides.

To start the server:
    python main.py
"""

import sys
from pathlib import Path

# add src to python path so the package imports without installing it
sys.path.insert(0, str(Path(__file__).parent / "src"))

# start the fastapi server when this file is run
if __name__ == "__main__":
    import uvicorn
    # run the api app on port 8000 with auto-reload for development
    uvicorn.run("slidesummarizer.api:app", host="0.0.0.0", port=8000, reload=True)
