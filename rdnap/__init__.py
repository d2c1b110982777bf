from pathlib import Path

from rdnap.convert import from_rd, try_from_rd
from rdnap.utils.exceptions import InvalidArgument

__version__ = "0.1.0"

__all__ = ["from_rd", "try_from_rd", "InvalidArgument", "package_root"]


def package_root() -> Path:
    return Path(__file__).parent
