from __future__ import annotations

import re
import unicodedata
from dataclasses import dataclass

_NON_ALNUM = re.compile(r"[^a-z0-9]+")


def slugify(value: str) -> str:
    """'Cap-Haïtien' -> 'cap-haitien', "Anse-d'Hainault" -> 'anse-dhainault'."""
    ascii_value = (
        unicodedata.normalize("NFKD", value).encode("ascii", "ignore").decode("ascii").lower().replace("'", "")
    )
    return _NON_ALNUM.sub("-", ascii_value).strip("-")


@dataclass(frozen=True)
class RegionEntry:
    slug: str
    name: str
    emoji: str
    cities: tuple[str, ...]

    def city_links(self) -> list[tuple[str, str]]:
        return [(name, slugify(name)) for name in self.cities]


# The ten departments with their main towns; used for the map and overview pages
# even when the database has not been seeded.
REGIONS: tuple[RegionEntry, ...] = (
    RegionEntry("artibonite", "Artibonite", "🌾", ("Gonaïves", "Saint-Marc", "Dessalines")),
    RegionEntry("centre", "Centre", "⛪", ("Mirebalais", "Hinche", "Lascahobas")),
    RegionEntry("grand-anse", "Grand'Anse", "🌿", ("Jérémie", "Anse-d'Hainault", "Moron")),
    RegionEntry("nippes", "Nippes", "🌊", ("Miragoâne", "Anse-à-Veau", "Baradères")),
    RegionEntry("nord", "Nord", "🏰", ("Cap-Haïtien", "Limbé", "Plaine-du-Nord")),
    RegionEntry("nord-est", "Nord-Est", "🏔️", ("Ouanaminthe", "Fort-Liberté", "Trou-du-Nord")),
    RegionEntry("nord-ouest", "Nord-Ouest", "🗿", ("Port-de-Paix", "Saint-Louis-du-Nord", "Jean-Rabel")),
    RegionEntry("ouest", "Ouest", "🏛️", ("Port-au-Prince", "Delmas", "Carrefour")),
    RegionEntry("sud", "Sud", "🏖️", ("Les Cayes", "Aquin", "Torbeck")),
    RegionEntry("sud-est", "Sud-Est", "🎨", ("Jacmel", "Bainet", "Belle-Anse")),
)


def search_regions(term: str) -> list[RegionEntry]:
    """Regions whose name or one of whose towns matches `term` (case/accent-insensitive)."""
    needle = slugify(term)
    if not needle:
        return list(REGIONS)
    return [
        r for r in REGIONS
        if needle in slugify(r.name) or any(needle in slugify(c) for c in r.cities)
    ]
