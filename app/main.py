"""
Showcase Proxy Server
Backend for the demo showcase: Gemini generation, fal.ai segmentation and
Discord notifications
"""
from typing import Dict, Any

from app.config import create_app
from app.routes.gemini import router as gemini_router
from app.routes.multiplayer import router as multiplayer_router
from app.routes.browse import router as browse_router
from app.routes.relay import router as relay_router
from app.routes.demos import router as demos_router


app = create_app()

# Include routers
app.include_router(gemini_router)
app.include_router(multiplayer_router)
app.include_router(browse_router)
app.include_router(relay_router)
app.include_router(demos_router)


@app.get("/")
def root() -> Dict[str, Any]:
    return {"message": "Welcome to the Showcase Proxy Server"}
