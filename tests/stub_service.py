"""In-process stand-in for the AIVI service, served to httpx through ASGITransport."""

from fastapi import APIRouter, FastAPI, HTTPException, Response
from pydantic import BaseModel

ChatRouter = APIRouter(prefix="/chat", tags=["Chat"])
AudioRouter = APIRouter(prefix="/audio", tags=["Audio"])

AUDIO_FILES = {
    "greeting.mp3": b"ID3\x04\x00\x00fake-mp3-frames\xff\xfb",
    "hello world.wav": b"RIFF\x24\x00\x00\x00WAVEfmt ",
}


class ChatRequest(BaseModel):
    user_input: str


@ChatRouter.post("")
async def chat_endpoint(request: ChatRequest):
    if request.user_input == "boom":
        raise HTTPException(status_code=500, detail="model crashed")
    return {"response": f"echo: {request.user_input}"}


@AudioRouter.get("/{filename}")
async def audio_endpoint(filename: str):
    if filename not in AUDIO_FILES:
        raise HTTPException(status_code=404, detail="audio not found")
    return Response(content=AUDIO_FILES[filename], media_type="audio/mpeg")


def create_app():
    app = FastAPI()
    app.include_router(ChatRouter)
    app.include_router(AudioRouter)
    return app
