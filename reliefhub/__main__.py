import uvicorn

from reliefhub.core.config import get_settings


def main():
    uvicorn.run("reliefhub.main:create_app", factory=True, host="0.0.0.0", port=get_settings().port)


if __name__ == "__main__":
    main()
