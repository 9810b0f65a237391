import uvicorn

from src.config import settings


def main() -> None:
    uvicorn.run("src.main:app", host="0.0.0.0", port=settings.port)


if __name__ == "__main__":
    main()
