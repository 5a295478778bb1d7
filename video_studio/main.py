import logging

import uvicorn
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from video_studio.api import ai_router, monetization_router, video_router
from video_studio.api.errors import register_exception_handlers
from video_studio.config import get_settings

settings = get_settings()

logging.basicConfig(
    level=settings.log_level.upper(),
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
)

app = FastAPI(title="AI Video Studio API")

register_exception_handlers(app)

# CORS
app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(ai_router)
app.include_router(monetization_router)
app.include_router(video_router)


@app.get("/health")
async def health() -> dict:
    return {"status": "ok", "simulationMode": get_settings().simulation_mode}


if __name__ == "__main__":
    uvicorn.run("video_studio.main:app", host="0.0.0.0", port=3000, reload=True)
