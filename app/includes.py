from app.routes.car.router import car_router as car


def get_all_routers():
    return [
        car,
    ]
