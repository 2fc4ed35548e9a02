#!/usr/bin/env python3
"""Start the AutoFake API server (empty catalog; see `create_app`)."""

import uvicorn

if __name__ == "__main__":
    uvicorn.run(
        "autofake.api.main:app",
        host="0.0.0.0",
        port=8000,
        reload=True,
        reload_dirs=["autofake"],
    )
