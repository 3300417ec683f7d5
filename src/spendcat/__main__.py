"""Run the API server: ``python -m spendcat``."""

import uvicorn

from spendcat.config import settings
from spendcat.core.logging import setup_logging
from spendcat.main import create_app


def main() -> None:
    setup_logging(settings.log_level, json_format=settings.log_json)
    uvicorn.run(create_app(), host=settings.host, port=settings.port, log_config=None)


if __name__ == "__main__":
    main()
