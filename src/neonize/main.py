from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

import neonize.routers.api as api_router
import neonize.routers.editor as editor_router
import neonize.routers.gallery as gallery_router
from neonize.config import API_PREFIX, CORS_ORIGINS


def create_app() -> FastAPI:

    app = FastAPI(title="Neonize Wallpaper API")

    app.add_middleware(
        CORSMiddleware,
        # In production, replace with the editor's domain
        allow_origins=CORS_ORIGINS,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    app.include_router(editor_router.get_router(), prefix=API_PREFIX)
    app.include_router(api_router.get_router(), prefix=API_PREFIX)
    app.include_router(gallery_router.get_router(), prefix=API_PREFIX)
    return app


app = create_app()


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(app, host="0.0.0.0", port=8000)
