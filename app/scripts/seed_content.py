"""
Seed the directory with business plans, the departments, the Nord cities and
a handful of places and historical figures. Safe to run more than once:
existing rows (matched by slug/code) are left untouched.

    python -m app.scripts.seed_content
"""
import asyncio
import logging

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker, create_async_engine

from app.core.config import settings
from app.models.business_plan import BusinessPlan
from app.models.city import City
from app.models.department import Department
from app.models.figure import Figure
from app.models.place import Place
from app.services.figures import dump_json_list


PLANS = [
    {"code": "starter", "name": "Starter", "price_month_cents": 1000,
     "features": ["Listed in city", "1 cover photo"]},
    {"code": "growth", "name": "Growth", "price_month_cents": 3000,
     "features": ["Featured spot", "Menu & booking links", "Gallery up to 10"]},
    {"code": "premium", "name": "Premium", "price_month_cents": 5000,
     "features": ["Homepage feature", "Priority support", "Unlimited gallery"]},
]

DEPARTMENTS = [
    {"slug": "nord", "name": "Nord — The Kingdom's Legacy", "hero_url": "/nord.png",
     "intro": "The cradle of Haitian independence and royal architecture. Former colonial capital known as 'Paris of the Antilles'."},
    {"slug": "nord-est", "name": "Nord-Est — The Frontier & the River",
     "hero_url": "https://images.unsplash.com/photo-1506905925346-21bda4d32df4",
     "intro": "Marked by forts, lagoons, and border trade with Dajabón. Historic bay and frontier culture."},
    {"slug": "nord-ouest", "name": "Nord-Ouest — Desert Beauty & Resistance",
     "hero_url": "https://images.unsplash.com/photo-1469474968028-56623f02e42e",
     "intro": "Remote and rugged, birthplace of the first black revolutionaries. Where Columbus first landed in 1492."},
    {"slug": "artibonite", "name": "Artibonite — Breadbasket of Haiti",
     "hero_url": "https://images.unsplash.com/photo-1500382017468-9049fed747ef",
     "intro": "Where independence was proclaimed. Haiti's rice basket along the fertile Artibonite River valley."},
    {"slug": "ouest", "name": "Ouest — Heartbeat of the Nation",
     "hero_url": "https://images.unsplash.com/photo-1582719478250-c89cae4dc85b",
     "intro": "The political, cultural, and artistic core. Capital region with vibrant urban life and mountain retreats."},
    {"slug": "sud-est", "name": "Sud-Est — Art, Carnival & Mountains",
     "hero_url": "https://images.unsplash.com/photo-1507525428034-b723cf961d3e",
     "intro": "Birthplace of Haitian art and carnival paper-mâché. Artistic seaside cities with rich cultural heritage."},
    {"slug": "sud", "name": "Sud — Nature's Sanctuary",
     "hero_url": "https://images.unsplash.com/photo-1439066615861-d1af74d74000",
     "intro": "Waterfalls, caves, and some of the best beaches in Haiti. Southern port and pristine island getaways."},
    {"slug": "grand-anse", "name": "Grand'Anse — Greenest Corner",
     "hero_url": "https://images.unsplash.com/photo-1441974231531-c6227db76b6e",
     "intro": "Known as 'The City of Poets'. Literary heritage with palm-lined paradise and mountain trails."},
    {"slug": "centre", "name": "Centre — Rivers & Sacred Hills",
     "hero_url": "https://images.unsplash.com/photo-1559827260-dc66d52bef19",
     "intro": "Cradle of both revolution and pilgrimage. Sacred waterfalls and colonial remains in scenic hills."},
]

CITIES = {
    "nord": [
        {"slug": "cap-haitien", "name": "Cap-Haïtien", "lat": 19.7579, "lng": -72.2040, "hero_url": "/cap-haitien.jpg",
         "summary": "Former colonial capital ('Paris of the Antilles'). Citadelle Laferrière, Sans-Souci Palace, Cathedral Notre-Dame, Labadee Beach."},
        {"slug": "milot", "name": "Milot", "lat": 19.6167, "lng": -72.2167, "hero_url": "/milot.png",
         "summary": "Royal heart of King Henry Christophe's reign. Sans-Souci Palace ruins, Ramiers site, mountain trails to the Citadelle."},
        {"slug": "limonade", "name": "Bord-de-Mer-de-Limonade", "lat": 19.6667, "lng": -72.1333, "hero_url": "/limonade.jpg",
         "summary": "Coastal charm, old sugar estates. Quiet beaches, colonial sugar mill ruins, fishing culture."},
    ],
}

PLACES = {
    "cap-haitien": [
        {"kind": "restaurant", "slug": "lakay-restaurant", "name": "Lakay Restaurant",
         "description": "Seaside Haitian cuisine & live music.", "price_range": "$",
         "cover_url": "https://images.unsplash.com/photo-1559339352-11d035aa65de"},
        {"kind": "landmark", "slug": "citadelle-laferriere", "name": "Citadelle Laferrière", "unesco_site": True,
         "description": "Iconic mountaintop fortress built under King Henry Christophe; UNESCO World Heritage site.",
         "cover_url": "https://images.unsplash.com/photo-1520975661595-6453be3f7070"},
        {"kind": "landmark", "slug": "habitation-breda-site", "name": "Habitation Bréda Historical Site",
         "description": "Birthplace of Toussaint Louverture (1743). Original plantation no longer exists, but site features monument, Lycée Toussaint Louverture, and commemorative markers.",
         "address": "Haut-du-Cap, Cap-Haïtien", "cover_url": "/cap-haitien.jpg", "is_featured": True},
    ],
    "milot": [
        {"kind": "landmark", "slug": "sans-souci-palace", "name": "Sans-Souci Palace", "unesco_site": True,
         "description": "King Henry Christophe's royal palace, the 'Versailles of Haiti.' Built 1810-1813 as the centerpiece of his kingdom.",
         "address": "Milot, Nord Department", "cover_url": "/milot.png", "is_featured": True},
        {"kind": "landmark", "slug": "royal-chapel-milot", "name": "Royal Chapel of Milot",
         "description": "Where King Henry I was crowned by Archbishop Jean-Baptiste-Joseph Brelle in 1811.",
         "address": "Milot, Nord Department",
         "cover_url": "https://images.unsplash.com/photo-1559827260-dc66d52bef19", "is_featured": True},
    ],
}

FIGURES = {
    "cap-haitien": [
        {"slug": "toussaint-louverture", "name": "Toussaint Louverture",
         "full_name": "François-Dominique Toussaint Louverture", "category": "Revolutionary Leader",
         "bio": "Born at Habitation Bréda du Haut-du-Cap near Cap-Français. The mastermind of the Haitian Revolution who rose from slavery to become Saint-Domingue's leader.",
         "birth_year": 1743, "death_year": 1803,
         "birth_place": "Habitation Bréda du Haut-du-Cap, near Cap-Français (Cap-Haïtien)",
         "death_place": "Fort de Joux, France",
         "legacy": "Father of Haitian independence, first successful slave revolution leader",
         "famous_works": "Constitution of Saint-Domingue (1801)",
         "contemporaries": "Jean-Jacques Dessalines, Henry Christophe, André Rigaud",
         "movements": "Haitian Revolution, Abolitionist movement",
         "lived_addresses": ["Habitation Bréda du Haut-du-Cap (childhood and early life)",
                             "Plantation at Petit-Cormier (as free man)"],
         "monuments": ["Monument at former Habitation Bréda site", "Lycée Toussaint Louverture at Cap-Haïtien",
                       "Fort de Joux memorial in France"],
         "quotes": ["En me renversant, on n'a abattu à Saint-Domingue que le tronc de l'arbre de la liberté, "
                    "mais il repoussera car ses racines sont profondes et nombreuses"],
         "portrait_url": "https://upload.wikimedia.org/wikipedia/commons/3/32/G%C3%A9n%C3%A9ral_Toussaint_Louverture.jpg"},
    ],
    "milot": [
        {"slug": "henry-christophe", "name": "Henry Christophe",
         "full_name": "Henri Christophe, King Henry I of Haiti", "category": "Revolutionary Leader & King",
         "bio": "Born in Grenada, rose from slavery to become King Henry I of Haiti (1811-1820). Built the royal capital at Milot.",
         "birth_year": 1767, "death_year": 1820,
         "birth_place": "British Grenada", "death_place": "Cap-Henri (Cap-Haïtien), Kingdom of Haiti",
         "legacy": "Created the Kingdom of Haiti, built architectural wonders that survive today",
         "famous_works": "Sans-Souci Palace, Citadelle Laferrière, Code Henry",
         "contemporaries": "Toussaint Louverture, Jean-Jacques Dessalines, Alexandre Pétion",
         "movements": "Haitian Revolution, Kingdom of Haiti monarchy",
         "lived_addresses": ["Sans-Souci Palace, Milot (royal residence)",
                             "Cap-Henry (renamed Cap-Français as his northern capital)"],
         "monuments": ["Sans-Souci Palace ruins in Milot", "Citadelle Laferrière on mountain near Milot",
                       "Royal Chapel of Milot", "Equestrian statue in Port-au-Prince"],
         "quotes": ["Je renais de mes cendres (I rise from my ashes)"],
         "portrait_url": "https://upload.wikimedia.org/wikipedia/commons/c/cc/Henri_Christophe.jpg"},
    ],
}

JSON_LIST_FIELDS = ("lived_addresses", "monuments", "quotes", "achievements")


async def seed(db: AsyncSession) -> dict[str, int]:
    """Insert whatever is missing; returns how many rows of each kind were created."""
    created = {"plans": 0, "departments": 0, "cities": 0, "places": 0, "figures": 0}

    for plan in PLANS:
        if not (await db.execute(select(BusinessPlan).where(BusinessPlan.code == plan["code"]))).scalar_one_or_none():
            db.add(BusinessPlan(**plan))
            created["plans"] += 1

    departments: dict[str, Department] = {}
    for data in DEPARTMENTS:
        dept = (await db.execute(select(Department).where(Department.slug == data["slug"]))).scalar_one_or_none()
        if not dept:
            dept = Department(**data, is_published=True)
            db.add(dept)
            created["departments"] += 1
        departments[data["slug"]] = dept
    await db.flush()

    cities: dict[str, City] = {}
    for dept_slug, rows in CITIES.items():
        dept = departments[dept_slug]
        for data in rows:
            city = (await db.execute(select(City).where(
                City.department_id == dept.id, City.slug == data["slug"],
            ))).scalar_one_or_none()
            if not city:
                city = City(department_id=dept.id, **data, is_published=True)
                db.add(city)
                created["cities"] += 1
            cities[data["slug"]] = city
    await db.flush()

    for city_slug, rows in PLACES.items():
        city = cities[city_slug]
        for data in rows:
            exists = (await db.execute(select(Place.id).where(
                Place.city_id == city.id, Place.slug == data["slug"],
            ))).scalar_one_or_none()
            if not exists:
                db.add(Place(city_id=city.id, **data, is_published=True))
                created["places"] += 1

    for city_slug, rows in FIGURES.items():
        city = cities[city_slug]
        for data in rows:
            exists = (await db.execute(select(Figure.id).where(
                Figure.city_id == city.id, Figure.slug == data["slug"],
            ))).scalar_one_or_none()
            if not exists:
                fields = {k: (dump_json_list(v) if k in JSON_LIST_FIELDS else v) for k, v in data.items()}
                db.add(Figure(city_id=city.id, **fields, is_published=True))
                created["figures"] += 1

    await db.commit()
    return created


async def main():
    engine = create_async_engine(settings.database_url, pool_pre_ping=True)
    Session = async_sessionmaker(engine, expire_on_commit=False)

    async with Session() as db:
        created = await seed(db)
        for kind, count in created.items():
            print(f"{kind}: {count} created")

    await engine.dispose()

if __name__ == "__main__":
    logging.basicConfig(level=settings.log_level)
    asyncio.run(main())
