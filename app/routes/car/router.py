import logging
from typing import Optional

from fastapi import APIRouter, Depends, HTTPException, UploadFile, status
from fastapi.encoders import jsonable_encoder

from app.database.db import CarStore, get_car_store
from app.models.car.car import AddCar, Car
from app.schemas.schema import get_car_form, get_car_photo
from app.services.json import return_json
from app.services.uploads import save_upload, upload_url
from app.utilities.helper import get_next_id, parse_int

logger = logging.getLogger(__name__)

car_router = APIRouter(
    tags=["Cars"],
)


# Get all cars
@car_router.get("/cars")
async def get_all_cars(store: CarStore = Depends(get_car_store)):
    return store.read_all()


# Add car, with an optional photo
@car_router.post("/add-car")
async def add_car(
    request_body: AddCar = Depends(get_car_form),
    car_photo: Optional[UploadFile] = Depends(get_car_photo),
    store: CarStore = Depends(get_car_store),
):
    try:
        image_url = None
        if car_photo:
            image_url = upload_url(save_upload(car_photo))

        cars = store.read_all()
        new_car = Car(
            id=get_next_id(cars),
            make=request_body.make,
            model=request_body.model,
            year=parse_int(request_body.year),
            price=parse_int(request_body.price),
            imageUrl=image_url,
        )
        car_data = jsonable_encoder(new_car)

        cars.append(car_data)
        store.write_all(cars)
        logger.info(f"Added car {car_data['id']}: {car_data['make']} {car_data['model']}")

        return return_json(
            message="Car added successfully",
            car=car_data,
            code=status.HTTP_201_CREATED,
        )

    except HTTPException as e:
        raise e
    except Exception as e:
        logger.error(f"Failed to add car: {str(e)}", exc_info=True)
        raise HTTPException(status_code=500, detail=str(e))
