"""Launch the pipe measurement FastAPI server."""

import uvicorn

from pipe_measure.config import settings


def main():
    uvicorn.run("pipe_measure.server:app", host=settings.host, port=settings.port, reload=settings.reload)


if __name__ == "__main__":
    main()
