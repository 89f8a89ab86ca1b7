from pathlib import Path

from fastapi import Request
from fastapi.templating import Jinja2Templates
from starlette.responses import Response

from app.services.booking import format_usd

TEMPLATES_DIR = Path(__file__).resolve().parents[1] / "templates"

PRICE_LABELS = {
    "$": "Budget",
    "$$": "Moderate",
    "$$$": "Upscale",
    "$$$$": "Fine Dining",
}

KIND_LABELS = {
    "restaurant": "🍽️ Restaurant",
    "hotel": "🏨 Hotel",
    "landmark": "🏛️ Landmark",
    "beach": "🏖️ Beach",
    "shop": "🏪 Local Shop",
    "event": "🎉 Event",
    "tour": "🧭 Tour",
    "activity": "🚣 Activity",
}

DB_ERROR_MESSAGE = "We're having trouble connecting to our database right now. Please try again in a moment."

templates = Jinja2Templates(directory=str(TEMPLATES_DIR))
templates.env.filters["usd"] = format_usd
templates.env.globals["PRICE_LABELS"] = PRICE_LABELS
templates.env.globals["KIND_LABELS"] = KIND_LABELS
templates.env.globals["DB_ERROR_MESSAGE"] = DB_ERROR_MESSAGE


def render(request: Request, name: str, context: dict | None = None, status_code: int = 200) -> Response:
    return templates.TemplateResponse(request, name, context or {}, status_code=status_code)


def render_not_found(request: Request, what: str = "Page") -> Response:
    return render(request, "not_found.html", {"what": what}, status_code=404)


def render_db_error(request: Request) -> Response:
    return render(request, "error.html", {"message": DB_ERROR_MESSAGE}, status_code=503)
