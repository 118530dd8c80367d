import os
from dotenv import load_dotenv

load_dotenv()

# Server
HOST = os.getenv("HOST", "0.0.0.0")
PORT = int(os.getenv("PORT", "3000"))
LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO")

# Storage (relative paths resolve against the working directory)
DATA_FILE = os.getenv("DATA_FILE", "cars.json")
PUBLIC_DIR = os.getenv("PUBLIC_DIR", "public")
UPLOADS_DIR = os.path.join(PUBLIC_DIR, "uploads")

# Public URLs
PUBLIC_URL_PREFIX = "/public"
UPLOADS_URL_PREFIX = f"{PUBLIC_URL_PREFIX}/uploads"

# Multipart field carrying the optional car photo
PHOTO_FIELD = "carPhoto"
