"""FastAPI application serving the part selection page.

GET  /  renders the catalog as checkboxes.
POST /  reports the checked parts and redirects back to GET /.
"""

from fastapi import FastAPI, HTTPException, Request, status
from fastapi.responses import HTMLResponse, RedirectResponse

from partpicker.catalog import PartCatalog
from partpicker.components import render_selection_page
from partpicker.config import Settings, get_settings
from partpicker.errors import FormDataError
from partpicker.log import get_logger
from partpicker.selection import SelectionInitializer, get_policy, parse_selection_form
from partpicker.submit import SelectionSubmitHandler

__all__ = ["create_app"]

log = get_logger(__name__)


def create_app(settings: Settings | None = None, catalog: PartCatalog | None = None) -> FastAPI:
    """Build the app. Each request is independent; only read-only objects are shared."""
    settings = settings or get_settings()
    catalog = catalog or PartCatalog()
    initializer = SelectionInitializer(get_policy(settings.checked_policy))
    submit_handler = SelectionSubmitHandler(page_name=settings.page_name)

    app = FastAPI(title=settings.page_title, docs_url=None, redoc_url=None, openapi_url=None)

    @app.get("/", response_class=HTMLResponse, name="index")
    def index() -> HTMLResponse:
        items = initializer.build(catalog.list())
        return HTMLResponse(render_selection_page(items, settings))

    @app.post("/", name="submit")
    async def submit(request: Request) -> RedirectResponse:
        form = await request.form()
        try:
            items = parse_selection_form(form)
        except FormDataError as e:
            log.warning("Rejected %s post: %s", settings.page_name, e.args[0])
            raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(e)) from e

        submit_handler.on_submit(items)
        return RedirectResponse(url=str(request.url_for("index")), status_code=status.HTTP_303_SEE_OTHER)

    return app
