"""Run the Inventory Management API with uvicorn: ``python -m inventory_tracker``."""
import logging
import uvicorn

from .config import HOST, LOG_LEVEL, PORT


def main() -> None:
    logging.basicConfig(
        level=LOG_LEVEL,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    logging.getLogger(__name__).info(f"Server is running on port {PORT}")
    uvicorn.run("inventory_tracker.main:app", host=HOST, port=PORT, log_level=LOG_LEVEL.lower())


if __name__ == "__main__":
    main()
