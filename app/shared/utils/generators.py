"""Primary-key generation for record, report and audit rows."""

from cuid2 import cuid_wrapper

_next_cuid = cuid_wrapper()


def generate_cuid() -> str:
    """Return a new CUID2 string, used as the default for every model id column."""
    return str(_next_cuid())
