from fastapi import Depends, HTTPException, Request, status
from starlette.datastructures import FormData, UploadFile
from starlette.formparsers import MultiPartException
from typing import Optional

from app.models.car.car import AddCar
from app.services.uploads import upload_error
from config import PHOTO_FIELD


def _multipart_boundary(content_type: str) -> Optional[str]:
    for param in content_type.split(";")[1:]:
        key, _, value = param.strip().partition("=")
        if key.lower() == "boundary":
            return value.strip('"')
    return None


async def read_car_form(request: Request) -> FormData:
    """Parse the submitted form, acting as the upload layer.

    Accepts a single file under the photo field. Malformed multipart bodies,
    extra photos and files under any other field fail as upload errors (500),
    before any field is checked.
    """
    content_type = request.headers.get("content-type", "")
    if content_type.lower().startswith("multipart/form-data"):
        boundary = _multipart_boundary(content_type)
        if not boundary:
            raise upload_error("Multipart: Boundary not found")
        body = await request.body()
        if f"--{boundary}--".encode("latin-1") not in body:
            raise upload_error("Unexpected end of form")

    try:
        form = await request.form()
    except MultiPartException as e:
        raise upload_error(e.message)

    photos = 0
    for field, value in form.multi_items():
        # A blank file input arrives with an empty filename
        if not isinstance(value, UploadFile) or not value.filename:
            continue
        if field != PHOTO_FIELD:
            raise upload_error("Unexpected field")
        photos += 1
        if photos > 1:
            raise upload_error("Unexpected field")
    return form


def _text_value(form: FormData, field: str) -> Optional[str]:
    value = form.get(field)
    return value if isinstance(value, str) else None


def get_car_form(form: FormData = Depends(read_car_form)):
    make = _text_value(form, "make")
    model = _text_value(form, "model")
    year = _text_value(form, "year")
    price = _text_value(form, "price")

    # Presence only; year and price are converted later
    if not make or not model or not year or not price:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail="Missing required car details.",
        )
    return AddCar(
        make=make,
        model=model,
        year=year,
        price=price,
    )


def get_car_photo(form: FormData = Depends(read_car_form)) -> Optional[UploadFile]:
    # A plain text value under the photo field is an ordinary body field
    for photo in form.getlist(PHOTO_FIELD):
        if isinstance(photo, UploadFile) and photo.filename:
            return photo
    return None
