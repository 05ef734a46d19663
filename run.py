import uvicorn

from shopdesk.app import create_app
from shopdesk.config import settings

app = create_app(settings)


if __name__ == "__main__":
    uvicorn.run("run:app", host="0.0.0.0", port=8000, reload=settings.debug)
