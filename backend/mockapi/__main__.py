"""Process bootstrap: `python -m mockapi` or the `user-mock-api` script.

Single uvicorn worker: the store lives in this process's memory.
"""

import uvicorn

from mockapi.config import get_settings


def main() -> None:
    settings = get_settings()
    uvicorn.run(
        "mockapi.main:app",
        host=settings.host,
        port=settings.port,
        workers=1,
        log_config=None,
    )


if __name__ == "__main__":
    main()
