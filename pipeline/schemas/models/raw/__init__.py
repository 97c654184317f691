"""Raw input Pydantic models — one module per upstream protocol."""

from models.raw.mni_raw import *  # noqa: F401, F403
