from dialectforge.capabilities import BASIC_CAPABILITIES
from dialectforge.dialects.base import Dialect, build_dialect, core_keywords

GENERIC_CAPABILITIES = BASIC_CAPABILITIES.with_overrides(name="generic")


def build_generic_dialect() -> Dialect:
    """ANSI profile: SQL-92 words plus SQLAlchemy's generic reserved list."""
    return build_dialect(GENERIC_CAPABILITIES, core_keywords())
