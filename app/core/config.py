import os

# Database Configuration
# Uses default credentials for local Docker Compose setup
DB_URL = os.getenv("DATABASE_URL", "postgres://user:password@db:5432/panda_pos_db")

# Application Metadata
PROJECT_NAME = "Panda POS Backend"
VERSION = "1.0.0"

# All order timestamps are stored and compared in this timezone
REFERENCE_TIMEZONE = os.getenv("REFERENCE_TIMEZONE", "America/Chicago")

# Supply items decremented by one unit on every paid order, regardless of the cart
FIXED_CONSUMABLES = tuple(
    name.strip()
    for name in os.getenv("FIXED_CONSUMABLES", "bags,napkins,flatware,fortune_cookies").split(",")
    if name.strip()
)

# Order id range (6 digits) and how many times a payment is retried on an id collision
ORDER_ID_MIN = 100000
ORDER_ID_MAX = 999999
ORDER_ID_MAX_ATTEMPTS = int(os.getenv("ORDER_ID_MAX_ATTEMPTS", 5))

# Placing-party label used by the self-service kiosk (kitchen display filters on it)
KIOSK_LABEL = os.getenv("KIOSK_LABEL", "Kiosk")
