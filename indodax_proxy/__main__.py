import logging

import uvicorn

from indodax_proxy.config import settings
from indodax_proxy.main import app

logger = logging.getLogger("indodax_proxy")


def main(host: str = settings.HOST, port: int = settings.PORT):
    logger.info("%s running on http://%s:%s", settings.APP_NAME, host, port)
    uvicorn.run(app, host=host, port=port)


if __name__ == "__main__":
    main()
