#!/usr/bin/env python3
"""Start the CNC Tools API server."""

import uvicorn

if __name__ == "__main__":
    uvicorn.run(
        "cnc_tools.main:app",
        host="0.0.0.0",
        port=8000,
        reload=True,
        reload_dirs=["cnc_tools"],
    )
