"""
Catálogo SCIAN → BMX — FastAPI app factory with startup catalog loading.
"""
from __future__ import annotations

from contextlib import asynccontextmanager
from pathlib import Path

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import HTMLResponse
from fastapi.staticfiles import StaticFiles

from catalogo import __version__
from catalogo.data.store import CatalogStore
from catalogo.api.dependencies import set_store, set_preferences
from catalogo.api.preferences import PreferenceStore
from catalogo.api.router_meta import router as meta_router
from catalogo.api.router_search import router as search_router
from catalogo.api.router_preferences import router as preferences_router
from catalogo.api.router_ws import router as ws_router

STATIC_DIR = Path(__file__).parent / "static"


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Load the catalog once at startup."""
    catalog_path = app.state.catalog_path
    print(f"  CATALOG_JSON = {catalog_path}")
    print(f"  CATALOG_JSON exists = {catalog_path.exists()}")

    store = CatalogStore(catalog_path).load()
    set_store(store)
    set_preferences(PreferenceStore(app.state.preferences_path))

    if store.row_count() > 0:
        print(f"\nCatálogo ready — {store.row_count():,} registros, {len(store.categories()):,} categorías\n")
    else:
        print("\nCatálogo ready — no data yet. Run `catalogo convert` to build catalogo.json.\n")
    yield


def create_app(catalog_path: Path | None = None, preferences_path: Path | None = None) -> FastAPI:
    from catalogo.config import CATALOG_JSON, PREFERENCES_FILE
    app = FastAPI(
        title="Catálogo SCIAN → BMX",
        description="Keyword lookup of BMX activity codes by SCIAN category",
        version=__version__,
        lifespan=lifespan,
    )

    app.state.catalog_path = Path(catalog_path or CATALOG_JSON)
    app.state.preferences_path = Path(preferences_path or PREFERENCES_FILE)

    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    app.include_router(meta_router)
    app.include_router(search_router)
    app.include_router(preferences_router)
    app.include_router(ws_router)

    if STATIC_DIR.is_dir():
        index_html = STATIC_DIR / "index.html"

        @app.get("/", response_class=HTMLResponse)
        async def serve_index():
            return HTMLResponse(
                content=index_html.read_text(encoding="utf-8"),
                headers={"Cache-Control": "no-cache, no-store, must-revalidate", "Pragma": "no-cache"},
            )

        app.mount("/static", StaticFiles(directory=str(STATIC_DIR)), name="static")

    return app


app = create_app()
