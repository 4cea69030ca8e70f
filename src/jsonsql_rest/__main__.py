"""Command line entry point: serve the API configured from the environment."""

import uvicorn

from ._app import create_app_from_settings
from ._config import load_settings
from ._logging import init_logging


def main() -> None:
    settings = load_settings()
    init_logging(settings.log_level)
    app = create_app_from_settings(settings)
    uvicorn.run(app, host=settings.host, port=settings.port, log_config=None)


if __name__ == "__main__":
    main()
