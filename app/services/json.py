from fastapi.responses import JSONResponse
from fastapi import status

def return_json(message: str = "Success", car: dict = None, code: int = status.HTTP_200_OK):
    return JSONResponse(
        status_code=code,
        content={"message": message, "car": car}
    )

def return_error_json(error: str = "Error", code: int = status.HTTP_400_BAD_REQUEST):
    return JSONResponse(
        status_code=code,
        content={"error": error}
    )
