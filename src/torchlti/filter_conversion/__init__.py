"""Conversions between transfer function, zero-pole-gain and SOS forms."""

from ._ba_to_sos import ba_to_sos
from ._ba_to_zpk import ba_to_zpk
from ._sos_to_ba import sos_to_ba
from ._zpk_to_sos import zpk_to_sos

__all__ = [
    "ba_to_sos",
    "ba_to_zpk",
    "sos_to_ba",
    "zpk_to_sos",
]
