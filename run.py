import uvicorn
import os

if __name__ == "__main__":
    # Pass the app object directly to avoid import issues and subprocess spawning
    from main import app
    from dotenv import load_dotenv

    load_dotenv()

    host = os.getenv("HOST", "0.0.0.0")
    port = int(os.getenv("PORT", "8000"))

    print(f"Starting OP-FW Admin Panel on http://{host}:{port}")

    uvicorn.run(
        app,
        host=host,
        port=port,
        reload=False,
        log_level="info"
    )
