"""Process entrypoint that serves the customer API with uvicorn."""

from __future__ import annotations

import uvicorn

from customer_service.api.api_config import get_api_config
from customer_service.common.logging import configure_logging
from customer_service.common.settings import get_settings


def main() -> None:
    configure_logging()
    config = get_api_config()
    uvicorn.run(
        "customer_service.api.app:app",
        host=config.host,
        port=config.port,
        log_level=get_settings().LOG_LEVEL.lower(),
        reload=False,
    )


if __name__ == "__main__":
    main()
