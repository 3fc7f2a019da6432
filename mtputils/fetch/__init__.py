"""Retrieval of resolved files through mtp-getfile."""

from mtputils.fetch.fetcher import Fetcher, FetchStats
from mtputils.fetch.getfile import GetfileResult, GetfileRunner

__all__ = [
    "Fetcher",
    "FetchStats",
    "GetfileResult",
    "GetfileRunner",
]
