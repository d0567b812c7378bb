import os
import logging
from dotenv import load_dotenv

load_dotenv()

# ==================================
# Mongo / Redis
# ==================================
MONGO_URI = os.getenv("MONGO_URI", "mongodb://localhost:27017")
MONGO_DATABASE = os.getenv("MONGO_DATABASE", "studynotion")
REDIS_URI = os.getenv("REDIS_URI", "redis://localhost:6379/0")

# ==================================
# Razorpay
# ==================================
RAZORPAY_KEY = os.getenv("RAZORPAY_KEY")
RAZORPAY_SECRET = os.getenv("RAZORPAY_SECRET")
RAZORPAY_BASE_URL = os.getenv("RAZORPAY_BASE_URL", "https://api.razorpay.com/v1")
RAZORPAY_TIMEOUT = float(os.getenv("RAZORPAY_TIMEOUT", "10"))

# ==================================
# Mail (SMTP over SSL)
# ==================================
MAIL_HOST = os.getenv("MAIL_HOST")
MAIL_PORT = int(os.getenv("MAIL_PORT", "465"))
MAIL_USER = os.getenv("MAIL_USER")
MAIL_PASS = os.getenv("MAIL_PASS")
MAIL_FROM = os.getenv("MAIL_FROM") or f"StudyNotion <{MAIL_USER}>"

LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO")
PORT = int(os.getenv("PORT", "4000"))


def setup_logging():
    logging.basicConfig(
        level=LOG_LEVEL.upper(),
        format="%(asctime)s - %(levelname)s - %(message)s",
    )
