# src/symbol_catalog/utils/logging_setup.py
import logging
import sys

PACKAGE_LOGGER = "symbol_catalog"
_HANDLER_NAME = "symbol_catalog.stderr"


def setup_logging(level: str = "INFO") -> logging.Logger:
    """
    Configure the ``symbol_catalog`` logger only; the root logger and any
    handlers the host application installed are left untouched.

    A stderr handler is attached only when the root logger has none, so
    records are not printed twice when the host already logs somewhere.
    Calling this again updates the level without stacking handlers.
    """
    level = (level or "INFO").upper()
    pkg = logging.getLogger(PACKAGE_LOGGER)
    pkg.setLevel(level)

    ours = [h for h in pkg.handlers if h.get_name() == _HANDLER_NAME]
    if logging.getLogger().handlers:
        for h in ours:
            pkg.removeHandler(h)
        return pkg

    if ours:
        ours[0].setLevel(level)
        return pkg

    handler = logging.StreamHandler(sys.stderr)
    handler.set_name(_HANDLER_NAME)
    handler.setLevel(level)
    handler.setFormatter(logging.Formatter("%(asctime)s %(levelname)s %(name)s: %(message)s"))
    pkg.addHandler(handler)
    return pkg
