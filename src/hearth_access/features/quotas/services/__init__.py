"""Quota services."""

from .quota_service import QuotaService, create_quota_service

__all__ = [
    "QuotaService",
    "create_quota_service",
]
