"""
➡️ But : Configurer les logs de l'application en un seul endroit.

setup_logging() est appelée une seule fois au démarrage (app.main).
Les modules loggent ensuite via logging.getLogger(__name__).
"""

import logging
import sys
from typing import Union

LOG_FORMAT = "%(asctime)s.%(msecs)03d %(levelname)s %(name)s: %(message)s"
LOG_DATEFMT = "%Y-%m-%d %H:%M:%S"

# Librairies bavardes : seulement WARNING+ (sauf si on demande DEBUG)
_NOISY_LOGGERS = ("uvicorn.access", "httpx", "multipart")


def setup_logging(level: Union[int, str] = logging.INFO) -> None:
    """
    Handler console unique sur le logger racine.
    Peut être rappelée sans dupliquer les handlers.
    """
    if isinstance(level, str):
        level = logging.getLevelName(level.upper())
        if not isinstance(level, int):
            level = logging.INFO

    root = logging.getLogger()
    root.setLevel(level)

    # Retire les handlers existants pour éviter les doublons
    for h in list(root.handlers):
        root.removeHandler(h)

    handler = logging.StreamHandler(sys.stderr)
    handler.setLevel(level)
    handler.setFormatter(logging.Formatter(fmt=LOG_FORMAT, datefmt=LOG_DATEFMT))
    root.addHandler(handler)

    if level > logging.DEBUG:
        for name in _NOISY_LOGGERS:
            logging.getLogger(name).setLevel(logging.WARNING)

    logging.captureWarnings(True)
