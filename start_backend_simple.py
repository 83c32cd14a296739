#!/usr/bin/env python3
"""
Simple Backend Starter
Runs the installed hostelops app under uvicorn with auto-reload
"""

import uvicorn
import os

if __name__ == "__main__":
    # Run from the project root so .env and reload_dirs resolve
    script_dir = os.path.dirname(os.path.abspath(__file__))
    os.chdir(script_dir)

    port = int(os.getenv("PORT", "8000"))

    print(f"🚀 Starting HostelOps API from: {script_dir}")
    print(f"📡 Server will be available at: http://localhost:{port}")
    print(f"📄 API docs will be available at: http://localhost:{port}/docs")

    uvicorn.run(
        "hostelops.main:app",
        host="0.0.0.0",
        port=port,
        reload=True,
        reload_dirs=["./hostelops"],
    )
