from fastapi import APIRouter

from app.web.pages.home import router as home_router
from app.web.pages.geography import router as geography_router
from app.web.pages.listing import router as listing_router
from app.web.pages.places import router as places_router
from app.web.pages.figures import router as figures_router


router = APIRouter(include_in_schema=False)
router.include_router(home_router)
router.include_router(geography_router)
# before places: "/rentals/list-property" must win over "/rentals/{place_slug}"
router.include_router(listing_router)
router.include_router(places_router)
router.include_router(figures_router)
