import logging
from fastapi import FastAPI
from .animate.api import router as animate_router

logging.basicConfig(level=logging.INFO, format="%(asctime)s %(name)s %(levelname)s %(message)s")

app = FastAPI(title="Inbetween Keyframe PoC")
app.include_router(animate_router)

@app.get("/health")
def health():
    return {"status": "ok"}
