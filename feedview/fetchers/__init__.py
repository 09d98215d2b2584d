from feedview.fetchers.base import BaseFetcher
from feedview.fetchers.http import HTTPFetcher

__all__ = ["BaseFetcher", "HTTPFetcher"]
