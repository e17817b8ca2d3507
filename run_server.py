"""
Launch the timeline board API under uvicorn.

Environment:
    SWIMLANE_HOST    bind address (default 127.0.0.1)
    SWIMLANE_PORT    port (default 8000)
    SWIMLANE_RELOAD  "1" to restart on source changes

Board settings (window, time format, sample seeding) are read by
TimelineConfig.from_env when the app starts.
"""
import os

import uvicorn

if __name__ == "__main__":
    host = os.environ.get("SWIMLANE_HOST", "127.0.0.1")
    port = int(os.environ.get("SWIMLANE_PORT", "8000"))
    reload = os.environ.get("SWIMLANE_RELOAD", "0") == "1"

    print(f"[*] Starting timeline board API on {host}:{port}")
    print(f"[*] Chart config: http://{host}:{port}/api/v1/chart  Docs: http://{host}:{port}/docs")
    uvicorn.run("swimlane.api.server:app", host=host, port=port, reload=reload)
