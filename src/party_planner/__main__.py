import uvicorn

from src.party_planner.core.config import get_settings


def main() -> None:
    settings = get_settings()
    uvicorn.run(
        "src.party_planner.main:app",
        host=settings.host,
        port=settings.port,
        reload=settings.debug,
    )


if __name__ == "__main__":
    main()
