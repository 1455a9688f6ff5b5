import logging

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
import uvicorn
import os

from app import config

# Router Imports
from routes import auth, players, characters, bans, logs, panel_logs, servers

logger = logging.getLogger(__name__)

app = FastAPI(title="OP-FW Admin Panel")

app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# Include API Routers
app.include_router(auth.router)
app.include_router(players.router)
app.include_router(characters.router)
app.include_router(bans.router)
app.include_router(logs.router)
app.include_router(panel_logs.router)
app.include_router(servers.router)


@app.on_event("startup")
def startup_event():
    tracked = config.op_fw_servers()
    if tracked:
        logger.info(f"Tracking online status on {len(tracked)} server(s): {', '.join(tracked)}")
    else:
        logger.warning("OP_FW_SERVERS is empty, player status will be unavailable")


@app.get("/")
def root():
    return {"status": "ok", "panel": "OP-FW Admin Panel"}


if __name__ == "__main__":
    from dotenv import load_dotenv
    load_dotenv()

    host = os.getenv("HOST", "0.0.0.0")
    port = int(os.getenv("PORT", "8000"))

    uvicorn.run(
        app,
        host=host,
        port=port,
        reload=False,
        log_level="info"
    )
