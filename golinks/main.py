import logging

from fastapi import BackgroundTasks, Depends, FastAPI, Form, HTTPException, Request
from fastapi.responses import HTMLResponse, JSONResponse, PlainTextResponse, RedirectResponse

from golinks import __version__, management, pages, resolver, schemas
from golinks.errors import DuplicateShortcut, InvalidInput, StoreError
from golinks.store import LinkStore

logger = logging.getLogger(__name__)

MANAGEMENT_PATH = "/_"

def get_store(request: Request) -> LinkStore:
    return request.app.state.store

def create_app(store: LinkStore) -> FastAPI:
    app = FastAPI(
        title="Go Links",
        description="Memorable short aliases for long URLs.",
        version=__version__,
        docs_url=f"{MANAGEMENT_PATH}/docs",
        redoc_url=None,
        openapi_url=f"{MANAGEMENT_PATH}/openapi.json",
    )
    app.state.store = store

    # --- error translation ---
    @app.exception_handler(InvalidInput)
    @app.exception_handler(DuplicateShortcut)
    async def bad_request(request: Request, exc: Exception):
        return JSONResponse(status_code=400, content={"detail": str(exc)})

    @app.exception_handler(StoreError)
    async def storage_failure(request: Request, exc: StoreError):
        logger.error("Storage failure on %s: %s", request.url.path, exc)
        return JSONResponse(status_code=500, content={"detail": "Storage failure"})

    # ---------- management page ----------
    @app.get("/", include_in_schema=False)
    def root():
        return RedirectResponse(MANAGEMENT_PATH, status_code=302)

    @app.get(MANAGEMENT_PATH, response_class=HTMLResponse, include_in_schema=False)
    def index(request: Request, store: LinkStore = Depends(get_store)):
        links = management.list_links(store)
        stats = management.compute_stats(links)
        base = str(request.base_url).rstrip("/")
        return pages.render_index(links, stats, base)

    @app.post(f"{MANAGEMENT_PATH}/add", include_in_schema=False)
    def add_form(
        shortcut: str | None = Form(None),
        url: str | None = Form(None),
        description: str | None = Form(None),
        store: LinkStore = Depends(get_store),
    ):
        if not shortcut or not url:
            return PlainTextResponse("Missing shortcut or URL", status_code=400)
        try:
            management.add_link(store, shortcut, url, description)
        except (InvalidInput, DuplicateShortcut) as exc:
            return PlainTextResponse(f"Error: {exc}", status_code=400)
        return RedirectResponse(MANAGEMENT_PATH, status_code=302)

    @app.post(f"{MANAGEMENT_PATH}/delete", include_in_schema=False)
    def delete_form(shortcut: str | None = Form(None), store: LinkStore = Depends(get_store)):
        if not shortcut:
            return PlainTextResponse("Missing shortcut", status_code=400)
        management.delete_link(store, shortcut)
        return RedirectResponse(MANAGEMENT_PATH, status_code=302)

    # ---------- JSON API ----------
    @app.get(f"{MANAGEMENT_PATH}/health", include_in_schema=False)
    def health(store: LinkStore = Depends(get_store)):
        return {"status": "ok" if store.is_open else "closed"}

    @app.get(f"{MANAGEMENT_PATH}/api/links", response_model=list[schemas.Link])
    def list_links(store: LinkStore = Depends(get_store)):
        return management.list_links(store)

    @app.post(f"{MANAGEMENT_PATH}/api/links", response_model=schemas.Link, status_code=201)
    def create_link(link_in: schemas.LinkCreate, store: LinkStore = Depends(get_store)):
        return management.add_link(store, link_in.shortcut, link_in.url, link_in.description)

    @app.get(f"{MANAGEMENT_PATH}/api/stats", response_model=schemas.Stats)
    def stats(store: LinkStore = Depends(get_store)):
        return management.compute_stats(management.list_links(store))

    @app.get(f"{MANAGEMENT_PATH}/api/links/{{shortcut:path}}", response_model=schemas.Link)
    def get_link(shortcut: str, store: LinkStore = Depends(get_store)):
        link = store.get(shortcut)
        if not link:
            raise HTTPException(status_code=404, detail="Link not found")
        return link

    @app.patch(f"{MANAGEMENT_PATH}/api/links/{{shortcut:path}}", response_model=schemas.Link)
    def update_link(shortcut: str, link_in: schemas.LinkUpdate, store: LinkStore = Depends(get_store)):
        link = management.update_link(store, shortcut, link_in.url, link_in.description)
        if not link:
            raise HTTPException(status_code=404, detail="Link not found")
        return link

    @app.delete(f"{MANAGEMENT_PATH}/api/links/{{shortcut:path}}", response_model=schemas.MessageOut)
    def delete_link(shortcut: str, store: LinkStore = Depends(get_store)):
        if not management.delete_link(store, shortcut):
            raise HTTPException(status_code=404, detail="Link not found")
        return {"ok": True, "detail": f"Link '{shortcut}' deleted"}

    # ---------- redirect ----------
    @app.get("/{shortcut:path}", include_in_schema=False)
    def redirect(shortcut: str, background_tasks: BackgroundTasks, store: LinkStore = Depends(get_store)):
        if shortcut == MANAGEMENT_PATH[1:] or shortcut.startswith(MANAGEMENT_PATH[1:] + "/"):
            raise HTTPException(status_code=404, detail="Not found")
        target = resolver.resolve(store, shortcut, defer=background_tasks.add_task)
        if not target:
            raise HTTPException(status_code=404, detail="Not found")
        return RedirectResponse(url=target.url, status_code=302)

    return app
