# favfilms/services/api/main.py
from __future__ import annotations

from favfilms.common.logging import get_logger
from favfilms.common.settings import get_settings

logger = get_logger(__name__)


def main() -> None:
    """
    Long-lived server unless SERVERLESS/VERCEL is set; in that mode the host
    runtime imports `favfilms.services.api.app:app` itself and we never bind.
    """
    cfg = get_settings()
    if cfg.serverless:
        logger.info("Serverless mode: not binding a socket; serve favfilms.services.api.app:app")
        return

    import uvicorn
    uvicorn.run(
        "favfilms.services.api.app:app",
        host=cfg.api.host,
        port=cfg.api.port,
        log_level=cfg.log_level.lower(),
    )


if __name__ == "__main__":
    main()
