import logging

from fastapi import APIRouter, Depends, File, Form, HTTPException, UploadFile
from sqlalchemy.ext.asyncio import AsyncSession

from app.core.db import get_db
from app.models.media import Media
from app.models.place import DINING_KINDS, RENTAL_KINDS
from app.schemas.photo import PhotoListOut, PhotoOut, PhotoUploadOut
from app.services.auth import Actor, get_actor
from app.services.content import get_published_place, list_place_media
from app.services.retry import DB_ERRORS
from app.services.storage import LocalObjectStore, get_photo_store, photo_key

log = logging.getLogger(__name__)
router = APIRouter()

UPLOAD_BUCKET = "user-uploads"


async def _discard_upload(db: AsyncSession, store: LocalObjectStore, key: str | None) -> None:
    # the stored file goes with the row that never made it
    try:
        await db.rollback()
    except DB_ERRORS:
        log.exception("rollback after failed upload also failed")
    if key is not None:
        try:
            store.delete(key)
        except OSError:
            log.exception("could not remove orphaned upload %s", key)


async def _store_photo(
    *,
    db: AsyncSession,
    store: LocalObjectStore,
    actor: Actor,
    collection: str,
    kinds: tuple[str, ...],
    not_found_detail: str,
    place_id: str,
    file: UploadFile | None,
    alt: str | None,
) -> PhotoUploadOut:
    if file is None or not file.filename:
        raise HTTPException(status_code=400, detail="No file provided")

    stored_key = None
    try:
        place = await get_published_place(db, place_id, kinds)
        if not place:
            raise HTTPException(status_code=404, detail=not_found_detail)

        data = await file.read()
        key = photo_key(collection, place.id, file.filename)
        url = store.put_bytes(key=key, data=data)
        stored_key = key

        photo = Media(
            place_id=place.id,
            path=url,
            alt=alt or f"Photo of {place.name}",
            bucket=UPLOAD_BUCKET,
        )
        db.add(photo)
        await db.commit()
    except HTTPException:
        raise
    except (*DB_ERRORS, ValueError):
        log.exception("photo upload failed: collection=%s place_id=%s by=%s", collection, place_id, actor.api_key_id)
        await _discard_upload(db, store, stored_key)
        raise HTTPException(status_code=500, detail="Failed to upload photo")

    log.info("photo uploaded: collection=%s place_id=%s media_id=%s", collection, place.id, photo.id)
    return PhotoUploadOut(photo=PhotoOut(id=photo.id, url=photo.path, alt=photo.alt))


async def _list_photos(db: AsyncSession, place_id: str) -> PhotoListOut:
    try:
        rows = await list_place_media(db, place_id)
    except DB_ERRORS:
        log.exception("photo fetch failed: place_id=%s", place_id)
        raise HTTPException(status_code=500, detail="Failed to fetch photos")
    return PhotoListOut(photos=[PhotoOut(id=r.id, url=r.path, alt=r.alt) for r in rows])


@router.post("/rentals/{place_id}/photos", response_model=PhotoUploadOut)
async def upload_rental_photo(
    place_id: str,
    file: UploadFile | None = File(default=None),
    alt: str | None = Form(default=None),
    actor: Actor = Depends(get_actor),
    store: LocalObjectStore = Depends(get_photo_store),
    db: AsyncSession = Depends(get_db),
) -> PhotoUploadOut:
    return await _store_photo(
        db=db,
        store=store,
        actor=actor,
        collection="rentals",
        kinds=RENTAL_KINDS,
        not_found_detail="Rental property not found",
        place_id=place_id,
        file=file,
        alt=alt,
    )


@router.get("/rentals/{place_id}/photos", response_model=PhotoListOut)
async def list_rental_photos(place_id: str, db: AsyncSession = Depends(get_db)) -> PhotoListOut:
    return await _list_photos(db, place_id)


@router.post("/restaurants/{place_id}/photos", response_model=PhotoUploadOut)
async def upload_restaurant_photo(
    place_id: str,
    file: UploadFile | None = File(default=None),
    alt: str | None = Form(default=None),
    actor: Actor = Depends(get_actor),
    store: LocalObjectStore = Depends(get_photo_store),
    db: AsyncSession = Depends(get_db),
) -> PhotoUploadOut:
    return await _store_photo(
        db=db,
        store=store,
        actor=actor,
        collection="restaurants",
        kinds=DINING_KINDS,
        not_found_detail="Restaurant not found",
        place_id=place_id,
        file=file,
        alt=alt,
    )


@router.get("/restaurants/{place_id}/photos", response_model=PhotoListOut)
async def list_restaurant_photos(place_id: str, db: AsyncSession = Depends(get_db)) -> PhotoListOut:
    return await _list_photos(db, place_id)
