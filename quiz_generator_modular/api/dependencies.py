# api/dependencies.py
from typing import Optional
import httpx

def get_http_transport() -> Optional[httpx.AsyncBaseTransport]:
    """Transport for provider calls; None means httpx's default network transport"""
    return None
