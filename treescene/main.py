"""
treescene HTTP entry point - FastAPI app exposing the scene pipeline.

Run with: uvicorn treescene.main:app
"""

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from .api import register_routes

app = FastAPI(title="treescene")

app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

register_routes(app)


@app.get("/health")
async def health():
    return {"status": "ok"}
