"""
Health check views for monitoring and deployment verification.

- /health/ answers as long as the process is up
- /health/ready/ also checks database connectivity
"""

import logging

from django.conf import settings
from django.db import DatabaseError, connections
from django.http import JsonResponse
from django.views.decorators.cache import never_cache
from django.views.decorators.http import require_GET

logger = logging.getLogger(__name__)


@never_cache
@require_GET
def health_check(request) -> JsonResponse:
    """
    Basic health check endpoint.

    Returns:
        JsonResponse: {"status": "ok", "version": "1.0.0", "environment": ...}
    """
    return JsonResponse(
        {
            "status": "ok",
            "version": getattr(settings, "VERSION", "1.0.0"),
            "environment": getattr(settings, "ENVIRONMENT", "unknown"),
        }
    )


@never_cache
@require_GET
def readiness_probe(request) -> JsonResponse:
    """
    Readiness probe endpoint.

    Returns 200 when the checkout database answers, 503 otherwise.
    """
    try:
        with connections[settings.POS_DATABASE_ALIAS].cursor() as cursor:
            cursor.execute("SELECT 1")
            cursor.fetchone()

        return JsonResponse({"status": "ready"})
    except DatabaseError as e:
        logger.error(f"Readiness probe failed: {e}")
        return JsonResponse({"status": "not_ready", "reason": str(e)}, status=503)
