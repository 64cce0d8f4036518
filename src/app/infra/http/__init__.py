"""Infra HTTP: cliente de saída usado pelo dispatcher."""

from .client import HttpClient, HttpClientConfig, HttpError

__all__ = ["HttpClient", "HttpClientConfig", "HttpError"]
