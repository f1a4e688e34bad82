"""Allow running the API with: python -m gesturio.api"""

import uvicorn

from gesturio.core import get_config


def main():
    """Run the API server."""
    config = get_config()
    uvicorn.run(
        "gesturio.api.main:app",
        host=config.api_host,
        port=config.api_port,
        reload=config.debug,
        log_level=config.log_level.value.lower(),
    )


if __name__ == "__main__":
    main()
