# main.py (root)
import uvicorn

from studynotion.config import settings
from studynotion.api.app import create_app

app = create_app()


if __name__ == "__main__":
    uvicorn.run(app, host="0.0.0.0", port=settings.PORT)
