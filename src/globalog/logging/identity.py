"""Application identity used to label the global logger."""

import os
import sys
from pathlib import Path

from ..constants import LABEL_ENV_VAR


def application_identifier() -> str:
    """Best-effort identifier for the running application.

    Checked in order: the ``GLOBALOG_LABEL`` environment variable, the
    top-level package of ``__main__`` when run with ``python -m``, the stem
    of ``sys.argv[0]``. Returns an empty string when none is available.
    """
    label = os.environ.get(LABEL_ENV_VAR)
    if label:
        return label

    main = sys.modules.get("__main__")
    spec = getattr(main, "__spec__", None)
    if spec is not None and spec.name:
        return spec.name.split(".")[0]

    argv = getattr(sys, "argv", None) or [""]
    if argv[0] and argv[0] != "-c":
        return Path(argv[0]).stem

    return ""
